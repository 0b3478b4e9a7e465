"""Console logging for connectome loads.

Each message is printed as a ruled header naming the component and level,
followed by the %-formatted text. Output goes to whatever sys.stdout is at
the time of the call, plus an optional extra stream such as a load log.

    LOG = get_logger("network.loader")
    LOG.warning("Unrecognized synapse code %r (row %d)", "Rp", 12)
"""

import sys
from datetime import datetime

RULE = "_" * 72

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _render(msg, args):
    try:
        return msg % args
    except TypeError:
        return msg


def get_logger(name, out=None):
    """Logger for one component.

    Parameters
    ----------
    name : str
        Component name, printed after the 'wormgraph:' prefix.
    out : file-like, optional
        Stream that receives a copy of every message.

    Returns
    -------
    callable
        log(level, msg, args), with .debug, .info, .warning and .error
        shortcuts taking (msg, *args).
    """
    prefix = f"wormgraph:{name}"

    def log(level, msg, args):
        stamp = datetime.now().strftime("%H:%M:%S")
        text = _render(msg, args)
        for dest in [sys.stdout] + ([out] if out else []):
            print(RULE, file=dest)
            print(f"{prefix} {level} [{stamp}]", file=dest)
            print(text, file=dest)

    for level in LEVELS:
        setattr(log, level.lower(),
                lambda msg, *args, _level=level: log(_level, msg, args))

    return log
