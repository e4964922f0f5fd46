"""Monitor geometry from GDK, for hosts built on GTK."""

from __future__ import annotations

import gi

gi.require_version("Gdk", "3.0")
from gi.repository import Gdk  # noqa: E402

from reflection.core.geometry import MonitorRect


def monitor_rect(monitor: Gdk.Monitor) -> MonitorRect:
    geom = monitor.get_geometry()
    return MonitorRect(geom.x, geom.y, geom.width, geom.height)


class GdkMonitors:
    """Monitor queries of ShellApi backed by a Gdk.Display.

    The tray goes on the bottom-most monitor, like the host's own
    message tray; the panel always uses the primary one.
    """

    def __init__(self, display: Gdk.Display | None = None) -> None:
        self._display = display

    @property
    def display(self) -> Gdk.Display:
        return self._display or Gdk.Display.get_default()

    def monitors(self) -> list[MonitorRect]:
        display = self.display
        return [
            monitor_rect(monitor=display.get_monitor(i))
            for i in range(display.get_n_monitors())
        ]

    def primary_monitor(self) -> MonitorRect:
        display = self.display
        monitor = display.get_primary_monitor() or display.get_monitor(0)
        return monitor_rect(monitor=monitor)

    def tray_monitor(self) -> MonitorRect:
        monitors = self.monitors()
        if not monitors:
            return self.primary_monitor()
        return max(monitors, key=lambda m: (m.y + m.height, -m.x))
