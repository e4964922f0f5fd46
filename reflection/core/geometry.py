"""Monitor and region geometry value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from reflection.core.errors import InvalidGeometry


class MonitorRect(NamedTuple):
    """Monitor rectangle in stage coordinates, as reported by the host."""

    x: int
    y: int
    width: int
    height: int

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def right(self) -> int:
        return self.x + self.width


class Point(NamedTuple):
    x: int
    y: int


class Size(NamedTuple):
    width: int
    height: int


class Rect(NamedTuple):
    """Rectangle relative to its owner (clip regions, etc.)."""

    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class RegionLayout:
    """Target geometry of a region for one relayout cycle."""

    position: Point
    size: Size
    clip: Rect | None = None

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    @property
    def bottom(self) -> int:
        return self.position.y + self.size.height


def validate_monitor(monitor: MonitorRect) -> None:
    """Raise InvalidGeometry unless the monitor has a positive area."""
    if monitor.width <= 0 or monitor.height <= 0:
        raise InvalidGeometry(
            f"monitor {monitor.width}x{monitor.height} at "
            f"({monitor.x}, {monitor.y}) has no area"
        )


def validate_extent(name: str, value: int) -> None:
    """Raise InvalidGeometry for a negative region extent."""
    if value < 0:
        raise InvalidGeometry(f"{name} must not be negative, got {value}")
