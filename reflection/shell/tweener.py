"""Fallback tween driver on the GLib main loop."""

from __future__ import annotations

from typing import Callable

import gi

gi.require_version("GLib", "2.0")
from gi.repository import GLib  # noqa: E402

from reflection.core.animation import AnimationVector
from reflection.log import get_logger

log = get_logger(name="tweener")

FRAME_INTERVAL_MS = 16  # ~60fps


class _Tween:
    def __init__(
        self,
        vector: AnimationVector,
        apply: Callable[[float], None],
        start: float | None,
        on_complete: Callable[[], None] | None,
        apply_opacity: Callable[[float], None] | None,
        start_opacity: float | None,
    ) -> None:
        self.vector = vector
        self.apply = apply
        self.start = start
        self.on_complete = on_complete
        self.apply_opacity = apply_opacity
        self.start_opacity = start_opacity
        self.progress = 0.0
        self.source_id = 0

    def step(self, progress: float) -> None:
        self.apply(self.vector.value_at(progress, start=self.start))
        if self.apply_opacity is not None and self.vector.opacity is not None:
            self.apply_opacity(self.vector.opacity_at(progress, start=self.start_opacity))


class FrameTweener:
    """Runs one tween per key, advancing a fixed step each frame.

    Starting a tween on a key that is already animating cancels the old
    one; the new tween resumes from wherever the region currently is.
    Vectors carrying an opacity also fade through *apply_opacity*.
    """

    def __init__(self) -> None:
        self._tweens: dict[str, _Tween] = {}

    def is_running(self, key: str) -> bool:
        return key in self._tweens

    def run(
        self,
        key: str,
        vector: AnimationVector,
        apply: Callable[[float], None],
        start: float | None = None,
        on_complete: Callable[[], None] | None = None,
        apply_opacity: Callable[[float], None] | None = None,
        start_opacity: float | None = None,
    ) -> None:
        self.cancel(key)
        tween = _Tween(
            vector=vector,
            apply=apply,
            start=start,
            on_complete=on_complete,
            apply_opacity=apply_opacity,
            start_opacity=start_opacity,
        )
        self._tweens[key] = tween
        if vector.duration_ms <= 0:
            self._finish(key=key, tween=tween)
            return
        tween.source_id = GLib.timeout_add(FRAME_INTERVAL_MS, self._tick, key)

    def cancel(self, key: str) -> None:
        tween = self._tweens.pop(key, None)
        if tween is not None and tween.source_id:
            GLib.source_remove(tween.source_id)
            log.debug("Cancelled tween %s toward %s", key, tween.vector.target)

    def cancel_all(self) -> None:
        for key in list(self._tweens):
            self.cancel(key)

    def _tick(self, key: str) -> bool:
        """Single animation frame; returning False removes the source."""
        tween = self._tweens.get(key)
        if tween is None:
            return False
        step = FRAME_INTERVAL_MS / tween.vector.duration_ms
        tween.progress = min(1.0, tween.progress + step)
        if tween.progress >= 1.0:
            tween.source_id = 0
            self._finish(key=key, tween=tween)
            return False
        tween.step(tween.progress)
        return True

    def _finish(self, key: str, tween: _Tween) -> None:
        tween.apply(float(tween.vector.target))
        if tween.apply_opacity is not None and tween.vector.opacity is not None:
            tween.apply_opacity(float(tween.vector.opacity))
        self._tweens.pop(key, None)
        if tween.on_complete is not None:
            tween.on_complete()
