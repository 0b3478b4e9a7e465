"""Map WormAtlas synapse codes onto the SynapseKind taxonomy.

Recognized codes:
    EJ   electrical junction   -> GapJunction
    Sp   send (polyadic)       -> ChemicalSend(EXCITATORY)
    R    receive               -> ChemicalReceive(EXCITATORY)

Every other code, including the empty string, falls back to
ChemicalSend(EXCITATORY). The fallback is silent in classify(); use
classify_code() to learn whether a code was recognized.
"""

from dataclasses import dataclass

from wormgraph.network.types import (
    ChemicalReceive,
    ChemicalSend,
    GapJunction,
    Polarity,
    SynapseKind,
    with_polarity,
)


SYNAPSE_CODES = {
    "EJ": GapJunction(),
    "Sp": ChemicalSend(Polarity.EXCITATORY),
    "R": ChemicalReceive(Polarity.EXCITATORY),
}

DEFAULT_KIND = ChemicalSend(Polarity.EXCITATORY)


@dataclass(frozen=True)
class Classification:
    """Result of classifying one code.

    recognized is False when kind is the fallback default.
    """
    code: str
    kind: SynapseKind
    recognized: bool


def classify_code(code, sign=None):
    """Classify a synapse code and report whether it was recognized.

    Parameters
    ----------
    code : str
        Synapse code as found in the edge table. Matching is exact.
    sign : float, optional
        Numeric sign or signed strength. When given and negative, a
        chemical kind becomes INHIBITORY. Gap junctions and NMJs ignore it.

    Returns
    -------
    Classification
    """
    kind = SYNAPSE_CODES.get(code) if isinstance(code, str) else None
    recognized = kind is not None
    if not recognized:
        kind = DEFAULT_KIND
    if sign is not None and sign < 0:
        kind = with_polarity(kind, Polarity.INHIBITORY)
    return Classification(code=code, kind=kind, recognized=recognized)


def classify(code):
    """SynapseKind for a code. Total: unknown codes give ChemicalSend(EXCITATORY)."""
    return classify_code(code).kind
