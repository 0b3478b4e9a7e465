"""Tabular inputs: the edge table and the optional neuron table.

The edge table is read with pandas, every field kept as text. NA
conversion is off, so an empty weight stays an empty string (and later
falls back to the default weight) while a row that is short of fields
shows up as missing values and is rejected.

Data source: WormAtlas NeuronConnect.csv
  columns: Neuron 1, Neuron 2, Type, Nbr
"""

from pathlib import Path

import pandas as pd

from wormgraph.network.errors import RowSourceError
from wormgraph.utils import get_logger

LOG = get_logger("sources")

EDGE_FIELDS = 4

NEURON_COLUMNS = ["name", "category", "region", "position"]


# ---------------------------------------------------------------------------
# Edge rows
# ---------------------------------------------------------------------------

def rows_from_frame(frame, first_line=1):
    """Yield four-field rows from an edge DataFrame.

    Parameters
    ----------
    frame : pd.DataFrame
        Exactly four columns: source, target, code, weight.
    first_line : int
        Line number of the first row, used in error messages.

    Yields
    ------
    tuple
        (source, target, code, weight_text)

    Raises
    ------
    RowSourceError
        If the frame does not have four columns or a row has missing fields.
    """
    if frame.shape[1] != EDGE_FIELDS:
        raise RowSourceError(
            f"Edge table has {frame.shape[1]} columns, expected {EDGE_FIELDS}: "
            f"{list(frame.columns)}"
        )
    for offset, values in enumerate(frame.itertuples(index=False, name=None)):
        if any(pd.isna(v) for v in values):
            raise RowSourceError(
                f"Line {first_line + offset}: expected {EDGE_FIELDS} fields, "
                f"got {sum(not pd.isna(v) for v in values)}"
            )
        yield values


def read_edge_rows(path, delimiter=",", header=True):
    """Read an edge table and yield its rows.

    Parameters
    ----------
    path : str or Path
        Delimited text file, e.g. NeuronConnect.csv.
    delimiter : str
        Field separator.
    header : bool
        Skip the first line as a header.

    Yields
    ------
    tuple of str
        (source, target, code, weight_text)

    Raises
    ------
    RowSourceError
        If the file is missing, cannot be tokenized, or has malformed rows.
    """
    path = Path(path)
    try:
        # The header line is read as data so every line, header included,
        # is held to the same field count. Extra fields raise ParserError.
        frame = pd.read_csv(
            path,
            sep=delimiter,
            header=None,
            dtype=str,
            keep_default_na=False,
        )
    except FileNotFoundError as err:
        raise RowSourceError(f"Edge table not found: {path}") from err
    except pd.errors.EmptyDataError as err:
        raise RowSourceError(f"Edge table is empty: {path}") from err
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as err:
        raise RowSourceError(f"Cannot read edge table {path}: {err}") from err

    if header:
        frame = frame.iloc[1:]
    LOG.info("Read %d rows from %s", len(frame), path)
    yield from rows_from_frame(frame, first_line=2 if header else 1)


# ---------------------------------------------------------------------------
# Neuron annotations
# ---------------------------------------------------------------------------

def read_neuron_table(path, delimiter=","):
    """Load a neuron annotation table, indexed by neuron name.

    Parameters
    ----------
    path : str or Path
        Delimited text file with a 'name' column and any of
        'category', 'region', 'position'. Other columns are ignored.
    delimiter : str
        Field separator.

    Returns
    -------
    pd.DataFrame
        Annotations indexed by name. When a name repeats, the first row wins.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Neuron table not found: {path}")

    all_columns = pd.read_csv(path, sep=delimiter, nrows=0).columns.tolist()
    if "name" not in all_columns:
        raise ValueError(f"Neuron table {path} lacks a 'name' column")
    use_columns = [c for c in NEURON_COLUMNS if c in all_columns]

    df = pd.read_csv(path, sep=delimiter, usecols=use_columns,
                     dtype={"name": str})
    n_dupes = int(df["name"].duplicated().sum())
    if n_dupes:
        LOG.warning("Neuron table %s repeats %d names; keeping first", path, n_dupes)
        df = df.drop_duplicates("name", keep="first")

    LOG.info("Loaded %d neuron annotations with columns: %s",
             len(df), ", ".join(use_columns))
    return df.set_index("name")
