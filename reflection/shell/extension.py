"""Extension entry point -- installs every adjustment on the host."""

from __future__ import annotations

from typing import Any

from reflection.core.config import PlacementConfig
from reflection.core.errors import HostApiUnavailable, InvalidGeometry, UnsupportedPlacement
from reflection.core.policy import LayoutPolicy
from reflection.log import get_logger
from reflection.shell import api
from reflection.shell.adjustments import ADJUSTMENTS, Installed

log = get_logger(name="extension")


class ReflectionExtension:
    """Owns the installed adjustments for one enable/disable cycle."""

    def __init__(self, shell: api.ShellApi, config: PlacementConfig | None = None) -> None:
        self._shell = shell
        self.policy = LayoutPolicy(config)
        self.installed: list[Installed] = []
        self.failed: list[str] = []

    @property
    def enabled(self) -> bool:
        return bool(self.installed)

    def enable(self) -> None:
        """Install each adjustment; one failing never stops the others."""
        if self.enabled:
            return
        self.failed.clear()
        for name, adjust in ADJUSTMENTS:
            try:
                self.installed.append(adjust(self._shell, self.policy))
            except HostApiUnavailable as exc:
                log.warning("Skipping %s: %s", name, exc)
                self.failed.append(name)
            except (InvalidGeometry, UnsupportedPlacement) as exc:
                log.warning("Skipping %s, host default kept: %s", name, exc)
                self.failed.append(name)
        self._relayout()
        log.info(
            "Enabled %d adjustments (%d skipped)", len(self.installed), len(self.failed)
        )

    def disable(self) -> None:
        """Remove overrides and handlers, then let the host lay out again."""
        for installed in reversed(self.installed):
            installed.undo(self._shell)
        self.installed.clear()
        self._relayout()

    def _relayout(self) -> None:
        emit = getattr(self._shell, "emit", None)
        if not callable(emit):
            log.warning("Host cannot emit %s, layout applies on next change", api.MONITORS_CHANGED)
            return
        emit(api.MONITORS_CHANGED)


_extension: ReflectionExtension | None = None


def init(meta: Any = None) -> None:
    """Host plugin hook; nothing to prepare before enable."""


def enable(shell: api.ShellApi, config: PlacementConfig | None = None) -> ReflectionExtension:
    global _extension
    if _extension is None:
        _extension = ReflectionExtension(shell, config)
    _extension.enable()
    return _extension


def disable() -> None:
    global _extension
    if _extension is not None:
        _extension.disable()
        _extension = None
