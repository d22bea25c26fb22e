#!/usr/bin/env python3
import math
import re
from typing import Any, Dict, Mapping, Optional, Union

from stats_calculator import PLAYERS

Number = Union[int, float]

MIN_PLAYERS_PER_GAME = 2
ZERO_SUM_TOLERANCE = 0.01

# Plain decimal or exponent notation; no underscores, hex, inf or nan
NUMBER_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


class GameValidationError(Exception):
    pass


def parse_result(player: str, raw: Any) -> Optional[Number]:
    """
    Convert one submitted field to a result.

    Blank strings and None mean the player sat the game out. Integral values
    come back as int so they are stored the way they were typed.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise GameValidationError(f"{player}: result must be a number")
    if isinstance(raw, str):
        raw = raw.strip()
        if raw == "":
            return None
        if not NUMBER_PATTERN.fullmatch(raw):
            raise GameValidationError(f"{player}: '{raw}' is not a number")

    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise GameValidationError(f"{player}: '{raw}' is not a number")
    except OverflowError:
        raise GameValidationError(f"{player}: result is out of range")

    if not math.isfinite(value):
        raise GameValidationError(f"{player}: result must be a finite number")
    if value.is_integer():
        return int(value)
    return value


def parse_game_entry(values: Mapping[str, Any]) -> Dict[str, Optional[Number]]:
    """
    Parse submitted form or JSON values into a game entry.

    Args:
        values: Mapping keyed by player name; absent players did not play

    Returns:
        Dictionary with one entry per player, None where the player sat out
    """
    return {player: parse_result(player, values.get(player)) for player in PLAYERS}


def validate_game_entry(entry: Mapping[str, Optional[Number]]) -> None:
    """
    Check a parsed entry before it is stored.

    Raises:
        GameValidationError: Fewer than two players have a result, or the
            results don't sum to zero
    """
    filled = [entry[p] for p in PLAYERS if entry.get(p) is not None]
    if len(filled) < MIN_PLAYERS_PER_GAME:
        raise GameValidationError(f"At least {MIN_PLAYERS_PER_GAME} players must have a score.")

    total = sum(filled)
    if abs(total) > ZERO_SUM_TOLERANCE:
        sign = "+" if total > 0 else ""
        if float(total).is_integer():
            total = int(total)
        raise GameValidationError(f"Scores must sum to 0 (currently {sign}{total}).")
