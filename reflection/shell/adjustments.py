"""Individual shell customizations, each installable on its own.

Every adjust_* function checks the host capabilities it needs, registers
its overrides and signal handlers, and returns an Installed record so
the extension can undo it on disable. Override callbacks run inside
host-dispatched handlers; geometry and placement errors there are
logged and leave the host default in place.
"""

from __future__ import annotations

import dataclasses
import functools
from dataclasses import dataclass, field
from typing import Any, Callable

from reflection.core.animation import RegionKind
from reflection.core.errors import InvalidGeometry, UnsupportedPlacement
from reflection.core.geometry import MonitorRect, Point, RegionLayout
from reflection.core.policy import (
    CornerAction,
    LayoutPolicy,
    compute_banner_offset,
    compute_console_region,
    menu_arrow_side,
    park_hot_corner,
    summary_arrow_side,
)
from reflection.core.position import Side
from reflection.log import get_logger
from reflection.shell import api
from reflection.shell.compat import (
    choose_hot_corner_strategy,
    monitor_source,
    require,
    tween_driver,
)

log = get_logger(name="adjustments")

SUMMARY_ALIGN_START = "start"


@dataclass
class Installed:
    """Overrides and signal handlers one adjustment registered.

    undo() only releases these. One-shot changes made at install (hidden
    panel corners, removed indicators, arrow sides, summary alignment)
    stay until the host rebuilds those widgets.
    """

    name: str
    overrides: list[str] = field(default_factory=list)
    handlers: list[int] = field(default_factory=list)

    def undo(self, shell: Any) -> None:
        for hook in self.overrides:
            shell.clear_override(hook)
        for handler_id in self.handlers:
            shell.disconnect(handler_id)
        self.overrides.clear()
        self.handlers.clear()


def _keep_host_default(name: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Log geometry/placement errors from an override instead of raising."""

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except (InvalidGeometry, UnsupportedPlacement) as exc:
                log.warning("%s: keeping host default (%s)", name, exc)
                return None

        return wrapper

    return decorator


def _local_frame(width: int, height: int) -> MonitorRect:
    """Coordinate frame of a child region, origin at its parent."""
    return MonitorRect(0, 0, width, height)


def adjust_layout(shell: api.ShellApi, policy: LayoutPolicy) -> Installed:
    """Pin the panel to the bottom and the tray to the top on relayout."""
    require(shell, "region_size", "set_region_position", "set_region_clip", "set_override")
    screens = monitor_source(shell)
    installed = Installed(name="layout")

    @_keep_host_default(name="layout")
    def on_relayout(*_args: Any) -> None:
        primary = screens.primary_monitor()
        panel = policy.compute_panel_region(
            monitor=primary, panel_height=shell.region_size(api.PANEL).height
        )
        shell.set_region_position(api.PANEL, panel.position.x, panel.position.y)

        tray_monitor = screens.tray_monitor()
        tray = policy.compute_tray_region(
            monitor=tray_monitor, tray_height=shell.region_size(api.TRAY).height
        )
        shell.set_region_position(api.TRAY, tray.position.x, tray.position.y)
        if tray.clip is not None:
            shell.set_region_clip(api.TRAY, tray.clip)
        log.debug("Relayout: panel at %s, tray at %s", panel.position, tray.position)

    shell.set_override(api.RELAYOUT, on_relayout)
    installed.overrides.append(api.RELAYOUT)
    return installed


def adjust_panel_corners(shell: api.ShellApi, policy: LayoutPolicy) -> Installed:
    """Hide the rounded panel corners, which only make sense at the top."""
    require(shell, "hide_panel_corners")
    shell.hide_panel_corners()
    return Installed(name="panel_corners")


def adjust_menus(shell: api.ShellApi, policy: LayoutPolicy) -> Installed:
    """Make panel menus open upward, including menus added later."""
    require(shell, "set_default_arrow_side", "menus", "set_menu_arrow_side", "connect")
    installed = Installed(name="menus")
    side = menu_arrow_side(panel_side=policy.config.panel_side)
    shell.set_default_arrow_side(side)

    def on_status_icon_added(*_args: Any) -> None:
        # The signal does not carry the new menu, so refresh all of them
        for menu in shell.menus():
            shell.set_menu_arrow_side(menu, side)

    installed.handlers.append(shell.connect(api.STATUS_ICON_ADDED, on_status_icon_added))
    on_status_icon_added()
    return installed


def adjust_hot_corners(shell: api.ShellApi, policy: LayoutPolicy) -> Installed:
    """Move the hot corners to the bottom, or take them out of play."""
    require(shell, "set_override")
    screens = monitor_source(shell)
    installed = Installed(name="hot_corners")
    mode = policy.config.hot_corners
    strategy = None
    if mode == Side.HIDDEN:
        strategy = choose_hot_corner_strategy(shell)
    elif mode == Side.BOTTOM:
        require(shell, "hot_corners", "move_hot_corner")

    @_keep_host_default(name="hot_corners")
    def on_update_hot_corners(*_args: Any) -> None:
        placement = policy.resolve_hot_corner_placement(monitor=screens.primary_monitor())
        if placement.action == CornerAction.RETAIN:
            return
        if placement.action == CornerAction.DISABLED:
            if strategy == CornerAction.DISABLED:
                shell.destroy_hot_corners()
                log.debug("Hot corners destroyed")
                return
            placement = park_hot_corner()
        for corner in shell.hot_corners():
            shell.move_hot_corner(corner, placement.x, placement.y)
        log.debug("Hot corners %s at (%s, %s)", placement.action.value, placement.x, placement.y)

    shell.set_override(api.UPDATE_HOT_CORNERS, on_update_hot_corners)
    installed.overrides.append(api.UPDATE_HOT_CORNERS)
    return installed


def adjust_indicators(shell: api.ShellApi, policy: LayoutPolicy) -> Installed:
    """Remove the status indicators configured as hidden."""
    require(shell, "indicator", "remove_indicator")
    for role in policy.config.indicators:
        if not policy.is_indicator_suppressed(name=role):
            continue
        if shell.indicator(role) is None:
            log.debug("Indicator %s not present", role)
            continue
        shell.remove_indicator(role)
        log.info("Removed indicator %s", role)
    return Installed(name="indicators")


def adjust_message_tray(shell: api.ShellApi, policy: LayoutPolicy) -> Installed:
    """Slide the tray down from the top edge instead of up from the bottom."""
    require(
        shell,
        "region_size",
        "set_override",
        "set_summary_alignment",
        "set_summary_arrow_side",
    )
    screens = monitor_source(shell)
    installed = Installed(name="message_tray")
    run_tween = tween_driver(shell)
    tray_side = policy.config.tray_side

    def tray_region() -> tuple[RegionLayout, MonitorRect]:
        monitor = screens.tray_monitor()
        region = policy.compute_tray_region(
            monitor=monitor, tray_height=shell.region_size(api.TRAY).height
        )
        return region, monitor

    @_keep_host_default(name="show_tray")
    def on_show_tray(*_args: Any) -> None:
        region, monitor = tray_region()
        vector = policy.compute_show_vector(region=region, monitor=monitor, side=tray_side)
        run_tween(api.TRAY, api.TRAY_STATE, vector, vector.tween_params())

    @_keep_host_default(name="hide_tray")
    def on_hide_tray(*_args: Any) -> None:
        region, monitor = tray_region()
        vector = policy.compute_hide_vector(region=region, monitor=monitor, side=tray_side)
        run_tween(api.TRAY, api.TRAY_STATE, vector, vector.tween_params())

    shell.set_override(api.SHOW_TRAY, on_show_tray)
    shell.set_override(api.HIDE_TRAY, on_hide_tray)
    installed.overrides.extend([api.SHOW_TRAY, api.HIDE_TRAY])

    shell.set_summary_alignment(SUMMARY_ALIGN_START)
    shell.set_summary_arrow_side(summary_arrow_side(tray_side=tray_side))

    # Start from the new resting place
    on_hide_tray()
    return installed


def adjust_notifications(shell: api.ShellApi, policy: LayoutPolicy) -> Installed:
    """Flip the notification banner animations to match a top tray.

    Notification positions are relative to the tray.
    """
    require(
        shell,
        "region_size",
        "region_position",
        "set_region_position",
        "set_override",
        "remove_tweens",
        "notification_expanded",
    )
    installed = Installed(name="notifications")
    run_tween = tween_driver(shell, fades=True)
    tray_side = policy.config.tray_side

    def banner() -> tuple[RegionLayout, MonitorRect, int]:
        tray = shell.region_size(api.TRAY)
        notification = shell.region_size(api.NOTIFICATION)
        x, y = shell.region_position(api.NOTIFICATION)
        region = RegionLayout(position=Point(x, y), size=notification)
        return region, _local_frame(width=tray.width, height=tray.height), tray.height

    @_keep_host_default(name="show_notification")
    def on_show_notification(*_args: Any) -> None:
        shell.remove_tweens(api.NOTIFICATION)
        region, frame, tray_height = banner()
        vector = policy.compute_show_vector(
            region=region, monitor=frame, side=tray_side, kind=RegionKind.NOTIFICATION
        )
        if shell.notification_expanded():
            # Expanded notifications keep their position, only fade in
            shown_y = region.position.y
        else:
            shown_y = compute_banner_offset(
                notification_height=region.height,
                tray_height=tray_height,
                expanded=False,
            )
        vector = dataclasses.replace(vector, shown_value=shown_y)
        run_tween(api.NOTIFICATION, api.NOTIFICATION_STATE, vector, vector.tween_params())

    @_keep_host_default(name="hide_notification")
    def on_hide_notification(*_args: Any) -> None:
        region, frame, _tray_height = banner()
        vector = policy.compute_hide_vector(
            region=region, monitor=frame, side=tray_side, kind=RegionKind.NOTIFICATION
        )
        run_tween(api.NOTIFICATION, api.NOTIFICATION_STATE, vector, vector.tween_params())

    @_keep_host_default(name="expand_notification")
    def on_expand_notification(*_args: Any) -> None:
        region, frame, tray_height = banner()
        collapsed_y = compute_banner_offset(
            notification_height=region.height, tray_height=tray_height, expanded=False
        )
        # A shrunk notification jumps into place; animating it would
        # open a visible gap
        if region.position.y < collapsed_y:
            shell.set_region_position(api.NOTIFICATION, region.position.x, collapsed_y)
            return
        expanded_y = compute_banner_offset(
            notification_height=region.height, tray_height=tray_height, expanded=True
        )
        if region.position.y == expanded_y:
            return
        vector = dataclasses.replace(
            policy.compute_show_vector(region=region, monitor=frame, side=tray_side),
            shown_value=expanded_y,
        )
        run_tween(api.NOTIFICATION, api.NOTIFICATION_STATE, vector, vector.tween_params())

    shell.set_override(api.SHOW_NOTIFICATION, on_show_notification)
    shell.set_override(api.HIDE_NOTIFICATION, on_hide_notification)
    shell.set_override(api.EXPAND_NOTIFICATION, on_expand_notification)
    installed.overrides.extend(
        [api.SHOW_NOTIFICATION, api.HIDE_NOTIFICATION, api.EXPAND_NOTIFICATION]
    )
    return installed


def adjust_console(shell: api.ShellApi, policy: LayoutPolicy) -> Installed:
    """Keep the debug console at the top edge, clear of the keyboard."""
    require(shell, "region_size", "set_region_position", "set_region_size", "set_override")
    screens = monitor_source(shell)
    installed = Installed(name="console")

    @_keep_host_default(name="console")
    def on_resize_console(*_args: Any) -> None:
        region = compute_console_region(
            monitor=screens.primary_monitor(),
            keyboard_height=shell.region_size(api.KEYBOARD).height,
        )
        shell.set_region_size(api.CONSOLE, region.width, region.height)
        shell.set_region_position(api.CONSOLE, region.position.x, region.position.y)

    shell.set_override(api.RESIZE_CONSOLE, on_resize_console)
    installed.overrides.append(api.RESIZE_CONSOLE)
    return installed


ADJUSTMENTS: tuple[tuple[str, Callable[[api.ShellApi, LayoutPolicy], Installed]], ...] = (
    ("layout", adjust_layout),
    ("console", adjust_console),
    ("panel_corners", adjust_panel_corners),
    ("menus", adjust_menus),
    ("hot_corners", adjust_hot_corners),
    ("indicators", adjust_indicators),
    ("message_tray", adjust_message_tray),
    ("notifications", adjust_notifications),
)
