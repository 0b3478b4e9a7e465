"""Command-line entry point: load an edge table and print a report.

Usage:
    python -m wormgraph NeuronConnect.csv
    python -m wormgraph NeuronConnect.csv --neurons neurons.csv --preview 20
    python -m wormgraph --config load.yaml
"""

import argparse
import sys

from wormgraph.config import LoadConfig
from wormgraph.network import ConnectomeError, load_connectome_file
from wormgraph.report import print_report
from wormgraph.utils import get_logger

LOG = get_logger("cli")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="wormgraph",
        description="Load a connectome edge table and report its size.",
    )
    parser.add_argument("edges", nargs="?", default=None,
                        help="Path to the edge table (source, target, type, weight).")
    parser.add_argument("-n", "--neurons", default=None,
                        help="Path to a neuron table with name, category, region, position.")
    parser.add_argument("-d", "--delimiter", default=None,
                        help="Field separator (default ',').")
    parser.add_argument("--no-header", dest="header", action="store_false", default=None,
                        help="The edge table has no header line.")
    parser.add_argument("-p", "--preview", type=int, default=None,
                        help="Number of connections to list (default 10).")
    parser.add_argument("-c", "--config", default=None,
                        help="YAML file with load settings; arguments override it.")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = LoadConfig.from_yaml(args.config) if args.config else LoadConfig()
        config = config.updated(
            edges=args.edges,
            neurons=args.neurons,
            delimiter=args.delimiter,
            header=args.header,
            preview=args.preview,
        )
        if config.edges is None:
            LOG.error("No edge table given, on the command line or in the config.")
            return 1
        connectome = load_connectome_file(
            config.edges,
            delimiter=config.delimiter,
            header=config.header,
            annotations=config.neurons,
        )
    except (ConnectomeError, OSError, ValueError) as err:
        LOG.error("%s", err)
        return 1

    print_report(connectome, n_preview=config.preview, out=sys.stdout)
    return 0
