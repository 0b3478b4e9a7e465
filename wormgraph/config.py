"""Load configuration, optionally read from YAML.

Example config:

    edges: data/NeuronConnect.csv
    neurons: data/neurons.csv
    delimiter: ","
    header: true
    preview: 10
"""

from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Any

import yaml

from wormgraph.utils import get_logger

LOG = get_logger("config")


@dataclass
class LoadConfig:
    """Where the edge table lives and how to read it.

    Parameters
    ----------
    edges : Path or str, optional
        Edge table path.
    neurons : Path or str, optional
        Neuron annotation table path.
    delimiter : str
        Field separator for both tables.
    header : bool
        Whether the edge table starts with a header line.
    preview : int
        Number of connections listed in the report.
    """

    edges: Any = None
    neurons: Any = None
    delimiter: str = ","
    header: bool = True
    preview: int = 10

    def __post_init__(self):
        if isinstance(self.edges, str):
            self.edges = Path(self.edges)
        if isinstance(self.neurons, str):
            self.neurons = Path(self.neurons)
        if not isinstance(self.delimiter, str) or not self.delimiter:
            raise ValueError(f"delimiter must be a non-empty string, got {self.delimiter!r}")
        if not isinstance(self.header, bool):
            raise ValueError(f"header must be true or false, got {self.header!r}")
        if isinstance(self.preview, bool) or not isinstance(self.preview, int) or self.preview < 0:
            raise ValueError(f"preview must be a non-negative integer, got {self.preview!r}")

    @classmethod
    def from_mapping(cls, mapping):
        """Build from a dict; unknown keys are an error."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}. Known: {sorted(known)}")
        return cls(**mapping)

    @classmethod
    def from_yaml(cls, path):
        """Read a YAML mapping from path."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {path}")
        with open(path, "r") as f:
            try:
                mapping = yaml.safe_load(f) or {}
            except yaml.YAMLError as err:
                raise ValueError(f"Cannot parse config {path}: {err}") from err
        if not isinstance(mapping, dict):
            raise ValueError(f"Config {path} must be a mapping, got {type(mapping).__name__}")
        LOG.info("Read load config from %s", path)
        return cls.from_mapping(mapping)

    def updated(self, **overrides):
        """Copy with the given non-None values replaced."""
        values = asdict(self)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return type(self).from_mapping(values)
