"""Console report for a loaded connectome."""

import math

from wormgraph.network.types import synapse_label


def format_weight(weight):
    """Lossless display of a weight: whole numbers without a fraction.

    >>> format_weight(1234567.0), format_weight(1.5), format_weight(0.1)
    ('1234567', '1.5', '0.1')
    """
    if math.isnan(weight):
        return "NaN"
    if math.isfinite(weight) and weight.is_integer():
        return str(int(weight))
    return repr(weight)


def format_connection(connection_id, source_name, target_name, connection):
    """One display line for a connection."""
    return (f"Conn {connection_id}: {source_name} -> {target_name} "
            f"(type={synapse_label(connection.kind)}, "
            f"weight={format_weight(connection.weight)})")


def summary_lines(connectome, n_preview=10):
    """Neuron and connection totals, then the first n_preview connections.

    Parameters
    ----------
    connectome : Connectome
    n_preview : int
        How many connections to list. 0 lists none.

    Returns
    -------
    list of str
    """
    lines = [
        f"Loaded {connectome.n_neurons} neurons",
        f"Loaded {connectome.n_connections} connections",
    ]
    for row in connectome.iter_named():
        if row[0] >= n_preview:
            break
        lines.append(format_connection(*row))
    return lines


def print_report(connectome, n_preview=10, out=None):
    """Print summary_lines to out (stdout by default)."""
    for line in summary_lines(connectome, n_preview=n_preview):
        print(line, file=out)
