"""wormgraph: connectome edge lists as in-memory directed multigraphs.

Reads a tabular description of neural connectivity (e.g. the WormAtlas
NeuronConnect table) and builds a graph of neurons and typed synaptic
connections, ready for later simulation or analysis.

Subpackages:
    network   Neuron registry, synapse classifier, graph store, loader
    sources   Edge and neuron tables read through pandas
    report    Console summaries of a loaded connectome
    config    YAML load configuration
    cli       Command-line entry point
"""

__version__ = "0.1.0"

from wormgraph.network import (
    Connectome,
    load_connectome,
    load_connectome_file,
)
