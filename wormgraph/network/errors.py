"""Errors raised while building a connectome.

Soft problems (an unparsable weight, an unknown synapse code, an unknown
neuron category) are not errors: they fall back to defaults.
"""


class ConnectomeError(Exception):
    """Base class for wormgraph failures."""


class RowSourceError(ConnectomeError):
    """The edge table could not produce a well-formed row."""


class InvalidReference(ConnectomeError, IndexError):
    """A neuron or connection id that does not exist in the graph."""
