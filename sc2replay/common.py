"""Compact enumerations and the 3D vector shared by the decoded types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator


class ObserveRole(IntEnum):
    """The role of a user who observes the game."""

    NONE = 0
    SPECTATOR = 1
    REFEREE = 2


class GameSpeed(IntEnum):
    SLOWER = 0
    SLOW = 1
    NORMAL = 2
    FAST = 3
    FASTER = 4


class GameResult(IntEnum):
    UNDECIDED = 0
    WIN = 1
    DEFEAT = 2
    TIE = 3


@dataclass(frozen=True)
class Vec3D:
    """A unit position in map coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_map_coord(cls, x: int, y: int, z: int, ratio: float) -> Vec3D:
        """Scale raw game event coordinates down by ``ratio``, flipping the y axis."""
        return cls(x / ratio, -1.0 * y / ratio, z / ratio)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def as_list(self) -> list[float]:
        """The vector in its serialised form, ``[x, y, z]``."""
        return list(self)