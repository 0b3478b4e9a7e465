"""Name -> id resolution while a connectome is being built.

The edge table names neurons by text; the same name recurs on many rows.
A NeuronRegistry interns each name once: the first sighting adds a neuron
to the graph, every later sighting returns the same id. Names are exact,
case-sensitive keys.
"""

import math

from wormgraph.network.types import BodyRegion, NeuronCategory


class NeuronRegistry:
    """Interns neuron names into a Connectome.

    Parameters
    ----------
    connectome : Connectome
        Graph that receives a new neuron for each new name.
    annotations : pd.DataFrame, optional
        Neuron annotations indexed by name, with any of the columns
        'category', 'region', 'position'. Used only when a neuron is
        created; missing rows or unreadable values fall back to defaults.
    """

    def __init__(self, connectome, annotations=None):
        self._connectome = connectome
        self._annotations = annotations
        self._ids = {}

    def resolve(self, name):
        """Id for name, adding a neuron on first sight."""
        try:
            return self._ids[name]
        except KeyError:
            pass
        category, region, position = self._describe(name)
        neuron_id = self._connectome.add_neuron(
            name, category=category, region=region, position=position
        )
        self._ids[name] = neuron_id
        return neuron_id

    def _describe(self, name):
        """Annotation for a new neuron, with defaults for anything unknown."""
        if self._annotations is None or name not in self._annotations.index:
            return NeuronCategory.OTHER, BodyRegion.UNKNOWN, 0.0
        row = self._annotations.loc[name]
        return (NeuronCategory.parse(row.get("category")),
                BodyRegion.parse(row.get("region")),
                _parse_position(row.get("position")))

    @property
    def names(self):
        """Registered names, in id order."""
        return list(self._ids)

    def __len__(self):
        return len(self._ids)

    def __contains__(self, name):
        return name in self._ids


def _parse_position(value):
    try:
        position = float(value)
    except (TypeError, ValueError):
        return 0.0
    return position if math.isfinite(position) else 0.0
