"""Host-version compatibility checks.

Host releases rename or drop the internals we hook into. Every
adjustment declares what it needs up front via require(), so a missing
capability surfaces as HostApiUnavailable before anything is mutated.
"""

from __future__ import annotations

from typing import Any, Callable

from reflection.core.animation import AnimationVector
from reflection.core.errors import HostApiUnavailable
from reflection.core.policy import CornerAction
from reflection.log import get_logger
from reflection.platform.monitors import GdkMonitors
from reflection.shell.tweener import FrameTweener

log = get_logger(name="compat")


def require(shell: Any, *names: str) -> None:
    """Raise HostApiUnavailable for the first missing callable on *shell*."""
    for name in names:
        if not callable(getattr(shell, name, None)):
            raise HostApiUnavailable(name=name)


def has(shell: Any, name: str) -> bool:
    return callable(getattr(shell, name, None))


def choose_hot_corner_strategy(shell: Any) -> CornerAction:
    """DISABLED when the host rebuilds corners itself, PARKED otherwise.

    Destroyed corners only come back if the host recreates them on the
    next relayout; otherwise parking them off-canvas keeps disable()
    reversible.
    """
    if getattr(shell, "supports_hot_corner_recreate", False) and has(
        shell, "destroy_hot_corners"
    ):
        return CornerAction.DISABLED
    require(shell, "hot_corners", "move_hot_corner")
    return CornerAction.PARKED


def monitor_source(shell: Any) -> Any:
    """Return the object answering monitor queries for *shell*.

    Hosts that do not expose their own monitor layout are read from the
    default Gdk.Display.
    """
    if has(shell, "primary_monitor") and has(shell, "tray_monitor"):
        return shell
    log.info("Host has no monitor queries, reading monitors from GDK")
    return GdkMonitors()


def tween_driver(
    shell: Any, tweener: FrameTweener | None = None, fades: bool = False
) -> Callable[[str, str, AnimationVector, dict[str, Any]], None]:
    """Return a callable running *vector* on a region.

    Uses the host tween driver when present. Otherwise a FrameTweener
    writes positions and opacity through the region setters and sets
    the state field to the final RegionState when the tween completes.
    Opacity is only animated when *fades* is set.
    """
    if has(shell, "tween"):

        def host_tween(
            region: str, state_field: str, vector: AnimationVector, params: dict[str, Any]
        ) -> None:
            shell.tween(region, state_field, vector.final_state.value, params)

        return host_tween

    require(shell, "set_region_position", "region_position", "set_region_state")
    if fades:
        require(shell, "region_opacity", "set_region_opacity")
    log.info("Host has no tween driver, animating on the GLib main loop")
    frames = tweener or FrameTweener()

    def frame_tween(
        region: str, state_field: str, vector: AnimationVector, params: dict[str, Any]
    ) -> None:
        log.debug("Tweening %s (%s) toward %s", region, state_field, vector.target)
        x, y = shell.region_position(region)
        start = y if vector.axis == "y" else x

        def apply(value: float) -> None:
            if vector.axis == "y":
                shell.set_region_position(region, x, int(round(value)))
            else:
                shell.set_region_position(region, int(round(value)), y)

        def apply_opacity(value: float) -> None:
            shell.set_region_opacity(region, int(round(value)))

        fading = fades and vector.opacity is not None

        def on_complete() -> None:
            shell.set_region_state(region, state_field, vector.final_state.value)

        frames.run(
            key=region,
            vector=vector,
            apply=apply,
            start=start,
            on_complete=on_complete,
            apply_opacity=apply_opacity if fading else None,
            start_opacity=shell.region_opacity(region) if fading else None,
        )

    return frame_tween
