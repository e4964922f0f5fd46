"""Error types raised by the layout policy and the host adapter."""

from __future__ import annotations


class ReflectionError(Exception):
    """Base class for every error this package raises."""


class InvalidGeometry(ReflectionError):
    """A monitor or region has a non-positive (or negative) dimension."""


class UnsupportedPlacement(ReflectionError):
    """A placement directive outside the handled set of sides."""


class HostApiUnavailable(ReflectionError):
    """The host shell lacks a region, method, or signal we patch.

    Host versions rename their internals; callers catch this per
    adjustment so the remaining customizations still apply.
    """

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        message = f"host API unavailable: {name}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
