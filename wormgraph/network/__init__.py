"""network: the connectome graph and how it is built.

Components, leaf first:
  - types:    NeuronCategory, BodyRegion, Polarity, SynapseKind variants
  - classify: synapse code -> SynapseKind
  - graph:    Connectome with neurons, connections, outgoing index
  - registry: neuron name -> dense id, creating neurons on first sight
  - loader:   rows -> Connectome
"""

from .types import (
    NeuronCategory,
    BodyRegion,
    Polarity,
    SynapseKind,
    ChemicalSend,
    ChemicalReceive,
    GapJunction,
    NeuromuscularJunction,
    SYNAPSE_VARIANTS,
    synapse_label,
)
from .errors import (
    ConnectomeError,
    RowSourceError,
    InvalidReference,
)
from .classify import (
    SYNAPSE_CODES,
    Classification,
    classify,
    classify_code,
)
from .graph import Neuron, Connection, Connectome
from .registry import NeuronRegistry
from .loader import (
    parse_weight,
    load_connectome,
    load_connectome_file,
)
