"""Turn notation parsing."""

import re
from typing import List, Literal, Optional, Tuple
from pydantic import BaseModel, Field

from .models import MoveError, Placement, EMPTY_TURN, INVALID_PLACEMENT


TurnAction = Literal["PLAY", "PASS", "UNDO"]

PLACEMENT_PATTERN = r'^(\d+)\s*,\s*(\d+)\s*=\s*([A-Za-z])$'


class TurnEntry(BaseModel):
    """A parsed turn."""
    action: TurnAction
    placements: List[Placement] = Field(default_factory=list)


def parse_placement(token: str) -> Optional[Placement]:
    """
    Parse `ROW,COL=L`.

    A lowercase letter is a normal tile, an uppercase letter a blank
    standing in for that letter.
    """
    match = re.match(PLACEMENT_PATTERN, token.strip())
    if not match:
        return None
    letter = match.group(3)
    return Placement.at(
        row=int(match.group(1)),
        col=int(match.group(2)),
        letter=letter,
        blank=letter.isupper(),
    )


def parse_turn(text: str) -> Tuple[Optional[TurnEntry], List[MoveError]]:
    """
    Parse one turn: `pass`, `undo`, or whitespace-separated placements.

    Returns a tuple of (entry, errors); entry is None if anything failed.
    """
    text = text.strip()
    errors: List[MoveError] = []

    if not text:
        errors.append(MoveError(code=EMPTY_TURN, message="Turn is empty"))
        return None, errors

    keyword = text.lower()
    if keyword == "pass":
        return TurnEntry(action="PASS"), errors
    if keyword == "undo":
        return TurnEntry(action="UNDO"), errors

    placements: List[Placement] = []
    for token in text.split():
        placement = parse_placement(token)
        if placement is None:
            errors.append(MoveError(
                code=INVALID_PLACEMENT,
                message=f"Invalid placement: '{token}' (expected ROW,COL=LETTER)",
            ))
            continue
        placements.append(placement)

    if errors:
        return None, errors
    return TurnEntry(action="PLAY", placements=placements), errors
