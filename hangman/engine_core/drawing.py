"""
Gallows Drawing - Maps mistake counts to body parts.

Each incorrect guess reveals the next part of the hanged figure,
in a fixed order. The table stops at six parts; mistake counts
beyond six reveal nothing new.
"""

from __future__ import annotations
from enum import Enum


class BodyPart(Enum):
    """Parts of the hanged figure, in reveal order."""
    HEAD = "head"
    BODY = "body"
    LEFT_ARM = "left_arm"
    RIGHT_ARM = "right_arm"
    LEFT_LEG = "left_leg"
    RIGHT_LEG = "right_leg"


BODY_PARTS: tuple[BodyPart, ...] = (
    BodyPart.HEAD,
    BodyPart.BODY,
    BodyPart.LEFT_ARM,
    BodyPart.RIGHT_ARM,
    BodyPart.LEFT_LEG,
    BodyPart.RIGHT_LEG,
)


def part_for_mistake(mistake_number: int) -> BodyPart | None:
    """Get the part revealed by the n-th mistake (1-based)."""
    if 1 <= mistake_number <= len(BODY_PARTS):
        return BODY_PARTS[mistake_number - 1]
    return None


def parts_for_mistakes(mistake_count: int) -> tuple[BodyPart, ...]:
    """Get every part visible after mistake_count mistakes."""
    return BODY_PARTS[:max(0, mistake_count)]
