"""Shared fixtures -- a recording stand-in for the host shell."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from reflection.core.geometry import MonitorRect, Rect, Size
from reflection.core.position import Side
from reflection.shell import api

PRIMARY = MonitorRect(0, 0, 1920, 1080)


class FakeShell:
    """Implements every ShellApi method and records what was done."""

    supports_hot_corner_recreate = False

    def __init__(self) -> None:
        self.primary = PRIMARY
        self.tray = PRIMARY
        self.sizes: dict[str, Size] = {
            api.PANEL: Size(1920, 30),
            api.TRAY: Size(1920, 28),
            api.NOTIFICATION: Size(1920, 60),
            api.KEYBOARD: Size(1920, 0),
        }
        self.positions: dict[str, tuple[int, int]] = {}
        self.clips: dict[str, Rect] = {}
        self.opacities: dict[str, int] = {}
        self.states: dict[str, str] = {}
        self.overrides: dict[str, Callable[..., Any]] = {}
        self.handlers: dict[int, tuple[str, Callable[..., Any]]] = {}
        self._next_handler = 1
        self.emitted: list[str] = []
        self.tweens: list[tuple[str, str, str, dict[str, Any]]] = []
        self.removed_tweens: list[str] = []
        self.corners = ["corner-0"]
        self.corner_positions: dict[str, tuple[int, int]] = {}
        self.corners_destroyed = False
        self.indicators: dict[str, object] = {"a11y": object(), "volume": object()}
        self.panel_corners_hidden = False
        self.menu_list = ["menu-a", "menu-b"]
        self.menu_sides: dict[str, Side] = {}
        self.default_arrow_side: Side | None = None
        self.summary_side: Side | None = None
        self.summary_alignment: str | None = None
        self.expanded = False

    # Monitors and regions

    def primary_monitor(self) -> MonitorRect:
        return self.primary

    def tray_monitor(self) -> MonitorRect:
        return self.tray

    def region_size(self, name: str) -> Size:
        return self.sizes[name]

    def region_position(self, name: str) -> tuple[int, int]:
        return self.positions.get(name, (0, 0))

    def set_region_position(self, name: str, x: int, y: int) -> None:
        self.positions[name] = (x, y)

    def set_region_size(self, name: str, width: int, height: int) -> None:
        self.sizes[name] = Size(width, height)

    def set_region_clip(self, name: str, clip: Rect) -> None:
        self.clips[name] = clip

    def region_opacity(self, name: str) -> int:
        return self.opacities.get(name, 255)

    def set_region_opacity(self, name: str, opacity: int) -> None:
        self.opacities[name] = opacity

    def set_region_state(self, name: str, state_field: str, state: str) -> None:
        self.states[state_field] = state

    # Overrides and signals

    def set_override(self, hook: str, callback: Callable[..., Any]) -> None:
        self.overrides[hook] = callback

    def clear_override(self, hook: str) -> None:
        self.overrides.pop(hook, None)

    def fire(self, hook: str, *args: Any) -> Any:
        """Simulate the host invoking an override after its default."""
        callback = self.overrides.get(hook)
        if callback is None:
            return None
        return callback(*args)

    def connect(self, signal: str, callback: Callable[..., Any]) -> int:
        handler_id = self._next_handler
        self._next_handler += 1
        self.handlers[handler_id] = (signal, callback)
        return handler_id

    def disconnect(self, handler_id: int) -> None:
        self.handlers.pop(handler_id, None)

    def emit(self, signal: str, *args: Any) -> None:
        self.emitted.append(signal)
        if signal == api.MONITORS_CHANGED:
            self.fire(api.RELAYOUT)
            self.fire(api.UPDATE_HOT_CORNERS)
        for connected, callback in list(self.handlers.values()):
            if connected == signal:
                callback(*args)

    # Animation

    def tween(
        self, region: str, state_field: str, target_state: str, params: dict[str, Any]
    ) -> None:
        self.tweens.append((region, state_field, target_state, params))

    def remove_tweens(self, region: str) -> None:
        self.removed_tweens.append(region)

    # Hot corners, indicators, menus

    def hot_corners(self) -> list[str]:
        return list(self.corners)

    def move_hot_corner(self, corner: str, x: int, y: int) -> None:
        self.corner_positions[corner] = (x, y)

    def destroy_hot_corners(self) -> None:
        self.corners = []
        self.corners_destroyed = True

    def indicator(self, role: str) -> object | None:
        return self.indicators.get(role)

    def remove_indicator(self, role: str) -> None:
        del self.indicators[role]

    def hide_panel_corners(self) -> None:
        self.panel_corners_hidden = True

    def menus(self) -> list[str]:
        return list(self.menu_list)

    def set_menu_arrow_side(self, menu: str, side: Side) -> None:
        self.menu_sides[menu] = side

    def set_default_arrow_side(self, side: Side) -> None:
        self.default_arrow_side = side

    def set_summary_arrow_side(self, side: Side) -> None:
        self.summary_side = side

    def set_summary_alignment(self, alignment: str) -> None:
        self.summary_alignment = alignment

    def notification_expanded(self) -> bool:
        return self.expanded


@pytest.fixture
def shell() -> FakeShell:
    return FakeShell()
