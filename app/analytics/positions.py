"""Classificazione codici posizione -> gruppo tattico."""

from enum import Enum


class PositionGroup(str, Enum):
    GOALKEEPER = "GOALKEEPER"
    DEFENDER = "DEFENDER"
    MIDFIELDER = "MIDFIELDER"
    STRIKER = "STRIKER"
    UNKNOWN = "UNKNOWN"


# Tabella unica ed esaustiva. Match esatto, case-sensitive, nessun trim.
POSITION_CODES: dict[str, PositionGroup] = {
    "GK": PositionGroup.GOALKEEPER,
    "CB": PositionGroup.DEFENDER,
    "RB": PositionGroup.DEFENDER,
    "LB": PositionGroup.DEFENDER,
    "RWB": PositionGroup.DEFENDER,
    "LWB": PositionGroup.DEFENDER,
    "CDM": PositionGroup.MIDFIELDER,
    "CM": PositionGroup.MIDFIELDER,
    "CAM": PositionGroup.MIDFIELDER,
    "LM": PositionGroup.MIDFIELDER,
    "RM": PositionGroup.MIDFIELDER,
    "ST": PositionGroup.STRIKER,
    "CF": PositionGroup.STRIKER,
    "LW": PositionGroup.STRIKER,
    "RW": PositionGroup.STRIKER,
}


def classify_position(code: str | None) -> PositionGroup:
    """Gruppo per il codice posizione; UNKNOWN per qualsiasi codice fuori tabella."""
    if not isinstance(code, str):
        return PositionGroup.UNKNOWN
    return POSITION_CODES.get(code, PositionGroup.UNKNOWN)
