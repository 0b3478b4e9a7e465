"""Closed vocabularies for neurons and synapses.

Neuron categories and body regions are plain enums with a lenient parser:
text that does not name a member falls back to OTHER / UNKNOWN.

SynapseKind is a closed sum type. Each variant is a frozen dataclass, so
kinds are hashable and compare by value. The chemical variants carry a
Polarity; GapJunction and NeuromuscularJunction carry nothing. Code that
dispatches on a kind should handle every class in SYNAPSE_VARIANTS.
"""

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Neuron annotations
# ---------------------------------------------------------------------------

def _normalize(text):
    if not isinstance(text, str):
        return ""
    return text.strip().lower().replace("-", "").replace("_", "").replace(" ", "")


class NeuronCategory(Enum):
    """Functional class of a neuron."""
    SENSORY = "sensory"
    INTERNEURON = "interneuron"
    MOTOR = "motor"
    OTHER = "other"

    @classmethod
    def parse(cls, text):
        """Member named by text (case-insensitive), else OTHER."""
        key = _normalize(text)
        for member in cls:
            if member.value == key:
                return member
        return cls.OTHER


class BodyRegion(Enum):
    """Coarse location of a neuron's soma along the body axis."""
    HEAD = "head"
    MIDBODY = "midbody"
    TAIL = "tail"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, text):
        """Member named by text (case-insensitive), else UNKNOWN."""
        key = _normalize(text)
        for member in cls:
            if member.value == key:
                return member
        return cls.UNKNOWN


class Polarity(Enum):
    """Sign of a chemical synapse."""
    EXCITATORY = "excitatory"
    INHIBITORY = "inhibitory"


# ---------------------------------------------------------------------------
# SynapseKind
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SynapseKind:
    """Base of the synapse taxonomy. Use one of the variants below."""

    @property
    def is_chemical(self):
        return isinstance(self, (ChemicalSend, ChemicalReceive))


@dataclass(frozen=True)
class ChemicalSend(SynapseKind):
    """Presynaptic side of a chemical synapse."""
    polarity: Polarity = Polarity.EXCITATORY


@dataclass(frozen=True)
class ChemicalReceive(SynapseKind):
    """Postsynaptic side of a chemical synapse."""
    polarity: Polarity = Polarity.EXCITATORY


@dataclass(frozen=True)
class GapJunction(SynapseKind):
    """Electrical synapse."""


@dataclass(frozen=True)
class NeuromuscularJunction(SynapseKind):
    """Synapse onto a muscle cell."""


SYNAPSE_VARIANTS = (ChemicalSend, ChemicalReceive, GapJunction, NeuromuscularJunction)


def with_polarity(kind, polarity):
    """Return kind with its polarity replaced. Non-chemical kinds pass through."""
    if isinstance(kind, ChemicalSend):
        return ChemicalSend(polarity)
    if isinstance(kind, ChemicalReceive):
        return ChemicalReceive(polarity)
    if isinstance(kind, (GapJunction, NeuromuscularJunction)):
        return kind
    raise TypeError(f"Unhandled synapse kind {kind!r}")


def synapse_label(kind):
    """Stable display label, e.g. 'ChemicalSend(Excitatory)' or 'GapJunction'."""
    if isinstance(kind, (ChemicalSend, ChemicalReceive)):
        return f"{type(kind).__name__}({kind.polarity.value.capitalize()})"
    if isinstance(kind, (GapJunction, NeuromuscularJunction)):
        return type(kind).__name__
    raise TypeError(f"Unhandled synapse kind {kind!r}")
