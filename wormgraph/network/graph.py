"""The connectome graph: neurons, connections, and an outgoing index.

A Connectome is a directed multigraph. Neurons and connections are stored
in insertion order and identified by their position, so ids are dense
integers in [0, n). For every neuron with outgoing connections the graph
keeps the ordered list of those connection ids.

Graph arrays follow the dense-index convention used for simulation input:
pre_idx[k], post_idx[k], weights[k] describe connection k.
"""

from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np
import pandas as pd
from scipy import sparse

from wormgraph.network.errors import InvalidReference
from wormgraph.network.types import (
    BodyRegion,
    NeuronCategory,
    SynapseKind,
    synapse_label,
)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Neuron:
    """A vertex of the connectome.

    Parameters
    ----------
    id : int
        Dense index, assigned in creation order.
    name : str
        Name as it appeared in the source table.
    category : NeuronCategory
        Functional class; OTHER when unknown.
    region : BodyRegion
        Body region of the soma; UNKNOWN when unknown.
    position : float
        Soma coordinate along the body axis; 0.0 when unknown.
    """
    id: int
    name: str
    category: NeuronCategory = NeuronCategory.OTHER
    region: BodyRegion = BodyRegion.UNKNOWN
    position: float = 0.0


@dataclass(frozen=True)
class Connection:
    """A directed, typed edge between two neurons."""
    source_id: int
    target_id: int
    kind: SynapseKind
    weight: float = 1.0


# ---------------------------------------------------------------------------
# Connectome
# ---------------------------------------------------------------------------

@dataclass
class Connectome:
    """A directed multigraph of neurons and synaptic connections.

    A Connectome starts empty and grows only through add_neuron and
    add_connection, which keep the outgoing index in step.

    Attributes
    ----------
    neurons : list of Neuron
        Indexed by neuron id.
    connections : list of Connection
        Indexed by connection id, in insertion order.
    """
    neurons: List[Neuron] = field(default_factory=list, init=False)
    connections: List[Connection] = field(default_factory=list, init=False)
    _outgoing: Dict[int, List[int]] = field(default_factory=dict, init=False,
                                            repr=False)

    @property
    def n_neurons(self):
        return len(self.neurons)

    @property
    def n_connections(self):
        return len(self.connections)

    def add_neuron(self, name, category=NeuronCategory.OTHER,
                   region=BodyRegion.UNKNOWN, position=0.0):
        """Append a neuron and return its id."""
        neuron_id = len(self.neurons)
        self.neurons.append(Neuron(
            id=neuron_id,
            name=name,
            category=category,
            region=region,
            position=float(position),
        ))
        return neuron_id

    def add_connection(self, source_id, target_id, kind, weight=1.0):
        """Append a connection and return its id.

        Raises
        ------
        InvalidReference
            If source_id or target_id does not name an existing neuron.
        """
        self._check_neuron_id(source_id)
        self._check_neuron_id(target_id)

        connection_id = len(self.connections)
        self.connections.append(Connection(
            source_id=source_id,
            target_id=target_id,
            kind=kind,
            weight=float(weight),
        ))
        self._outgoing.setdefault(source_id, []).append(connection_id)
        return connection_id

    def _check_neuron_id(self, neuron_id):
        if not _is_index(neuron_id) or not 0 <= neuron_id < len(self.neurons):
            raise InvalidReference(
                f"No neuron with id {neuron_id!r} "
                f"(graph has {len(self.neurons)} neurons)"
            )

    def neuron(self, neuron_id):
        """The Neuron with this id."""
        self._check_neuron_id(neuron_id)
        return self.neurons[neuron_id]

    def connection(self, connection_id):
        """The Connection with this id."""
        if (not _is_index(connection_id)
                or not 0 <= connection_id < len(self.connections)):
            raise InvalidReference(
                f"No connection with id {connection_id!r} "
                f"(graph has {len(self.connections)} connections)"
            )
        return self.connections[connection_id]

    def outgoing(self, neuron_id):
        """Ids of connections leaving a neuron, in insertion order."""
        self._check_neuron_id(neuron_id)
        return tuple(self._outgoing.get(neuron_id, ()))

    @property
    def outgoing_index(self):
        """Copy of the outgoing index: neuron id -> tuple of connection ids.

        Neurons without outgoing connections have no entry.
        """
        return {nid: tuple(cids) for nid, cids in self._outgoing.items()}

    def iter_named(self):
        """Yield (connection_id, source_name, target_name, connection)."""
        for cid, conn in enumerate(self.connections):
            yield (cid,
                   self.neurons[conn.source_id].name,
                   self.neurons[conn.target_id].name,
                   conn)

    # -----------------------------------------------------------------------
    # Export
    # -----------------------------------------------------------------------

    def to_arrays(self):
        """Dense-index arrays for simulation input.

        Returns
        -------
        tuple of np.ndarray
            (pre_idx, post_idx, weights), each of length n_connections.
        """
        pre_idx = np.fromiter((c.source_id for c in self.connections),
                              dtype=np.int32, count=len(self.connections))
        post_idx = np.fromiter((c.target_id for c in self.connections),
                               dtype=np.int32, count=len(self.connections))
        weights = np.fromiter((c.weight for c in self.connections),
                              dtype=np.float64, count=len(self.connections))
        return pre_idx, post_idx, weights

    def weight_matrix(self, kinds=None):
        """Sparse n x n matrix of summed connection weights.

        Parameters
        ----------
        kinds : iterable of SynapseKind, optional
            Keep only connections of these kinds.

        Returns
        -------
        scipy.sparse.csr_matrix
            Entry [i, j] is the total weight from neuron i to neuron j.
            Parallel connections are summed.
        """
        pre_idx, post_idx, weights = self.to_arrays()
        if kinds is not None:
            wanted = set(kinds)
            mask = np.array([c.kind in wanted for c in self.connections],
                            dtype=bool)
            pre_idx, post_idx, weights = pre_idx[mask], post_idx[mask], weights[mask]
        n = self.n_neurons
        matrix = sparse.coo_matrix((weights, (pre_idx, post_idx)), shape=(n, n))
        return matrix.tocsr()

    def neuron_frame(self):
        """Neurons as a DataFrame indexed by id."""
        return pd.DataFrame({
            "name": [n.name for n in self.neurons],
            "category": [n.category.value for n in self.neurons],
            "region": [n.region.value for n in self.neurons],
            "position": [n.position for n in self.neurons],
        }, index=pd.RangeIndex(self.n_neurons, name="neuron_id"))

    def to_frame(self):
        """Connections as a DataFrame indexed by id, with endpoint names."""
        names = [n.name for n in self.neurons]
        return pd.DataFrame({
            "source_id": [c.source_id for c in self.connections],
            "target_id": [c.target_id for c in self.connections],
            "source": [names[c.source_id] for c in self.connections],
            "target": [names[c.target_id] for c in self.connections],
            "kind": [synapse_label(c.kind) for c in self.connections],
            "weight": [c.weight for c in self.connections],
        }, index=pd.RangeIndex(self.n_connections, name="connection_id"))

    def summary(self):
        """Return a summary string."""
        lines = [
            f"Connectome: {self.n_neurons:,} neurons, "
            f"{self.n_connections:,} connections",
        ]
        if self.connections:
            kinds = pd.Series([synapse_label(c.kind) for c in self.connections])
            lines.append(f"  kinds: {kinds.value_counts().to_dict()}")
            weights = [c.weight for c in self.connections]
            lines.append(f"  weight range: [{min(weights):.3f}, {max(weights):.3f}]")
        return "\n".join(lines)

    def __repr__(self):
        return (f"Connectome({self.n_neurons} neurons, "
                f"{self.n_connections} connections)")


def _is_index(value):
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)
