"""Build a Connectome from four-field edge rows.

Each row reads (source name, target name, synapse code, weight text), the
layout of the WormAtlas NeuronConnect table (Neuron 1, Neuron 2, Type, Nbr).
Rows are consumed strictly in order. The load is all-or-nothing: a
malformed row, or an error raised by the row source, aborts it.
"""

import pandas as pd

from wormgraph.network.classify import classify_code
from wormgraph.network.errors import RowSourceError
from wormgraph.network.graph import Connectome
from wormgraph.network.registry import NeuronRegistry
from wormgraph.utils import get_logger

LOG = get_logger("network.loader")

DEFAULT_WEIGHT = 1.0

N_FIELDS = 4


def parse_weight(text, default=DEFAULT_WEIGHT):
    """Weight from its text field; default when absent or unparsable.

    Digit separators ("1_000") and surrounding whitespace (" 2") make the
    text unparsable.

    >>> parse_weight("-0.5")
    -0.5
    >>> parse_weight("abc")
    1.0
    """
    if text is None:
        return default
    if isinstance(text, str) and ("_" in text or text != text.strip()):
        return default
    try:
        return float(text)
    except (TypeError, ValueError):
        return default


def load_connectome(rows, annotations=None):
    """Build a Connectome from an iterable of edge rows.

    Parameters
    ----------
    rows : iterable of sequence
        Each row holds exactly four fields: source name, target name,
        synapse code, weight text. No header row.
    annotations : pd.DataFrame, optional
        Neuron annotations indexed by name (see sources.read_neuron_table).

    Returns
    -------
    Connectome

    Raises
    ------
    RowSourceError
        If a row does not have four fields, or the row source fails.
    """
    connectome = Connectome()
    registry = NeuronRegistry(connectome, annotations=annotations)
    defaulted = {}

    for row_number, row in enumerate(rows, start=1):
        if len(row) != N_FIELDS:
            raise RowSourceError(
                f"Row {row_number}: expected {N_FIELDS} fields, got {len(row)}"
            )
        source_name, target_name, code, weight_text = row

        weight = parse_weight(weight_text)
        source_id = registry.resolve(source_name)
        target_id = registry.resolve(target_name)

        classification = classify_code(code)
        if not classification.recognized:
            if code not in defaulted:
                LOG.warning("Unrecognized synapse code %r (row %d); "
                            "using ChemicalSend(Excitatory)", code, row_number)
            defaulted[code] = defaulted.get(code, 0) + 1

        connectome.add_connection(source_id, target_id,
                                  classification.kind, weight)

    if defaulted:
        LOG.info("Defaulted synapse codes: %s", defaulted)
    LOG.info("Loaded %d neurons, %d connections",
             connectome.n_neurons, connectome.n_connections)
    return connectome


def load_connectome_file(path, delimiter=",", header=True, annotations=None):
    """Read an edge table from disc and build its Connectome.

    Parameters
    ----------
    path : str or Path
        Delimited text file with four columns.
    delimiter : str
        Field separator.
    header : bool
        Whether the first line is a header to skip.
    annotations : str, Path or pd.DataFrame, optional
        Neuron annotations, either loaded or as a path to a neuron table.

    Returns
    -------
    Connectome
    """
    from wormgraph.sources import read_edge_rows, read_neuron_table

    if annotations is not None and not isinstance(annotations, pd.DataFrame):
        annotations = read_neuron_table(annotations, delimiter=delimiter)

    LOG.info("Loading connectome from %s", path)
    rows = read_edge_rows(path, delimiter=delimiter, header=header)
    return load_connectome(rows, annotations=annotations)
