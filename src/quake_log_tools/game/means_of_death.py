"""
Means of Death

The closed vocabulary of death causes written by the Quake III Arena server
into Kill lines, and the parser that maps a log token onto it.
"""

from enum import Enum
from typing import Dict

from .exceptions import UnrecognizedCause


class MeanOfDeath(Enum):
    """A cause of death as it appears in the server log (``MOD_*`` token)."""

    UNKNOWN = "MOD_UNKNOWN"
    SHOTGUN = "MOD_SHOTGUN"
    GAUNTLET = "MOD_GAUNTLET"
    MACHINEGUN = "MOD_MACHINEGUN"
    GRENADE = "MOD_GRENADE"
    GRENADE_SPLASH = "MOD_GRENADE_SPLASH"
    ROCKET = "MOD_ROCKET"
    ROCKET_SPLASH = "MOD_ROCKET_SPLASH"
    PLASMA = "MOD_PLASMA"
    PLASMA_SPLASH = "MOD_PLASMA_SPLASH"
    RAILGUN = "MOD_RAILGUN"
    LIGHTNING = "MOD_LIGHTNING"
    BFG = "MOD_BFG"
    BFG_SPLASH = "MOD_BFG_SPLASH"
    WATER = "MOD_WATER"
    SLIME = "MOD_SLIME"
    LAVA = "MOD_LAVA"
    CRUSH = "MOD_CRUSH"
    TELEFRAG = "MOD_TELEFRAG"
    FALLING = "MOD_FALLING"
    SUICIDE = "MOD_SUICIDE"
    TARGET_LASER = "MOD_TARGET_LASER"
    TRIGGER_HURT = "MOD_TRIGGER_HURT"
    NAIL = "MOD_NAIL"
    CHAINGUN = "MOD_CHAINGUN"
    PROXIMITY_MINE = "MOD_PROXIMITY_MINE"
    KAMIKAZE = "MOD_KAMIKAZE"
    JUICED = "MOD_JUICED"
    GRAPPLE = "MOD_GRAPPLE"

    @property
    def token(self) -> str:
        """The literal written to the log."""
        return self.value

    @property
    def label(self) -> str:
        """Short human readable name, e.g. ``trigger-hurt``."""
        return self.name.lower().replace('_', '-')


# Exact token lookup; case-sensitive and without trimming
_MEANS_BY_TOKEN: Dict[str, MeanOfDeath] = {mean.value: mean for mean in MeanOfDeath}


def parse_mean_of_death(token: str) -> MeanOfDeath:
    """
    Parse a cause of death token taken from a Kill line.

    Args:
        token: The token exactly as written in the log (callers trim it).

    Returns:
        The matching MeanOfDeath member.

    Raises:
        UnrecognizedCause: If the token is not one of the known literals.
    """
    try:
        return _MEANS_BY_TOKEN[token]
    except KeyError:
        raise UnrecognizedCause(token) from None
