"""Tests for the layout policy."""

import pytest

from reflection.core.animation import RegionKind, RegionState
from reflection.core.config import PlacementConfig
from reflection.core.errors import InvalidGeometry, UnsupportedPlacement
from reflection.core.geometry import MonitorRect, Point, Rect, RegionLayout, Size
from reflection.core.policy import (
    CONSOLE_WIDTH_RATIO,
    LayoutPolicy,
    compute_banner_offset,
    compute_console_region,
    is_indicator_suppressed,
    menu_arrow_side,
    summary_arrow_side,
)
from reflection.core.position import Side

FULL_HD = MonitorRect(0, 0, 1920, 1080)

MONITORS = [
    FULL_HD,
    MonitorRect(1920, 0, 1280, 1024),
    MonitorRect(0, 1080, 2560, 1440),
    MonitorRect(-1366, -200, 1366, 768),
    MonitorRect(0, 0, 1, 1),
]


@pytest.fixture
def policy():
    return LayoutPolicy()


class TestPanelRegion:
    def test_full_hd_scenario(self, policy):
        # Given / When
        region = policy.compute_panel_region(FULL_HD, panel_height=30)
        # Then
        assert region.position == Point(0, 1050)
        assert region.size == Size(1920, 30)
        assert region.clip is None

    @pytest.mark.parametrize("monitor", MONITORS)
    @pytest.mark.parametrize("panel_height", [0, 1, 30, 64])
    def test_bottom_edge_is_monitor_bottom(self, policy, monitor, panel_height):
        region = policy.compute_panel_region(monitor, panel_height=panel_height)
        assert region.position.y + panel_height == monitor.y + monitor.height
        assert region.position.x == monitor.x
        assert region.width == monitor.width

    @pytest.mark.parametrize(
        "monitor", [MonitorRect(0, 0, 0, 1080), MonitorRect(0, 0, 1920, -1)]
    )
    def test_degenerate_monitor(self, policy, monitor):
        with pytest.raises(InvalidGeometry):
            policy.compute_panel_region(monitor, panel_height=30)

    def test_negative_panel_height(self, policy):
        with pytest.raises(InvalidGeometry):
            policy.compute_panel_region(FULL_HD, panel_height=-1)


class TestTrayRegion:
    def test_pinned_to_top(self, policy):
        region = policy.compute_tray_region(FULL_HD, tray_height=28)
        assert region.position == Point(0, 0)
        assert region.size == Size(1920, 28)

    def test_clip_spans_monitor_height(self, policy):
        region = policy.compute_tray_region(FULL_HD, tray_height=28)
        assert region.clip == Rect(0, 0, 1920, 1080)

    @pytest.mark.parametrize("monitor", MONITORS)
    @pytest.mark.parametrize("tray_height", [0, 28, 200, 5000])
    def test_clip_never_shorter_than_monitor(self, policy, monitor, tray_height):
        region = policy.compute_tray_region(monitor, tray_height=tray_height)
        assert region.position.y == monitor.y
        assert region.clip.height >= monitor.height
        assert region.clip.width == monitor.width

    def test_degenerate_monitor(self, policy):
        with pytest.raises(InvalidGeometry):
            policy.compute_tray_region(MonitorRect(0, 0, 1920, 0), tray_height=28)


class TestShowHideVectors:
    def _tray(self, policy, monitor=FULL_HD, height=28):
        return policy.compute_tray_region(monitor, tray_height=height)

    def test_full_hd_tray_scenario(self, policy):
        # Given
        tray = self._tray(policy)
        # When
        show = policy.compute_show_vector(tray, FULL_HD, Side.TOP)
        hide = policy.compute_hide_vector(tray, FULL_HD, Side.TOP)
        # Then
        assert show.target == 0
        assert hide.target == -27

    def test_vector_metadata_comes_from_config(self):
        policy = LayoutPolicy(PlacementConfig(animation_time_ms=350, easing="linear"))
        show = policy.compute_show_vector(self._tray(policy), FULL_HD, Side.TOP)
        assert show.axis == "y"
        assert show.duration_ms == 350
        assert show.easing == "linear"
        assert show.direction is RegionState.SHOWING
        assert show.opacity is None

    def test_bar_hidden_leaves_one_pixel_seam(self, policy):
        tray = self._tray(policy, height=40)
        hide = policy.compute_hide_vector(tray, FULL_HD, Side.TOP)
        assert hide.hidden_value + tray.height == FULL_HD.y + 1

    def test_bottom_side(self, policy):
        panel = policy.compute_panel_region(FULL_HD, panel_height=30)
        show = policy.compute_show_vector(panel, FULL_HD, Side.BOTTOM)
        hide = policy.compute_hide_vector(panel, FULL_HD, Side.BOTTOM)
        assert show.target == 1050
        assert hide.target == 1079

    def test_left_and_right_use_x_axis(self, policy):
        region = RegionLayout(position=Point(0, 0), size=Size(48, 1080))
        left = policy.compute_hide_vector(region, FULL_HD, Side.LEFT)
        right = policy.compute_hide_vector(region, FULL_HD, Side.RIGHT)
        assert left.axis == right.axis == "x"
        assert left.shown_value == 0
        assert left.target == -47
        assert right.shown_value == 1872
        assert right.target == 1919

    def test_offset_monitor(self, policy):
        monitor = MonitorRect(1920, 200, 1280, 1024)
        tray = self._tray(policy, monitor=monitor)
        assert policy.compute_show_vector(tray, monitor, Side.TOP).target == 200
        assert policy.compute_hide_vector(tray, monitor, Side.TOP).target == 200 - 27

    def test_zero_height_region_has_no_seam(self, policy):
        tray = self._tray(policy, height=0)
        assert policy.compute_hide_vector(tray, FULL_HD, Side.TOP).target == 0

    def test_notification_hides_fully_and_fades(self, policy):
        # Given
        region = RegionLayout(position=Point(0, 0), size=Size(1920, 60))
        # When
        show = policy.compute_show_vector(region, FULL_HD, Side.TOP, kind=RegionKind.NOTIFICATION)
        hide = policy.compute_hide_vector(region, FULL_HD, Side.TOP, kind=RegionKind.NOTIFICATION)
        # Then
        assert show.opacity == 255
        assert hide.opacity == 0
        assert hide.target == -60
        assert FULL_HD.y - hide.target >= region.height

    @pytest.mark.parametrize("side", [Side.HIDDEN, Side.SHOWN])
    def test_non_edge_side_is_unsupported(self, policy, side):
        with pytest.raises(UnsupportedPlacement):
            policy.compute_show_vector(self._tray(policy), FULL_HD, side)
        with pytest.raises(UnsupportedPlacement):
            policy.compute_hide_vector(self._tray(policy), FULL_HD, side)

    def test_degenerate_monitor(self, policy):
        with pytest.raises(InvalidGeometry):
            policy.compute_show_vector(self._tray(policy), MonitorRect(0, 0, 0, 0), Side.TOP)


class TestInterruptedTransitions:
    """Vectors depend on size and monitor only, never on current position."""

    @pytest.mark.parametrize("current_y", [-27, -20, -13, -1, 0])
    def test_show_target_is_stable(self, policy, current_y):
        # Given -- the tray caught somewhere mid-hide
        mid = RegionLayout(position=Point(0, current_y), size=Size(1920, 28))
        # When
        hide = policy.compute_hide_vector(mid, FULL_HD, Side.TOP)
        show = policy.compute_show_vector(mid, FULL_HD, Side.TOP)
        # Then
        assert show.target == 0
        assert hide.target == -27
        assert show == policy.compute_show_vector(
            RegionLayout(position=Point(0, 0), size=Size(1920, 28)), FULL_HD, Side.TOP
        )


class TestHotCorners:
    @pytest.mark.parametrize("monitor", MONITORS)
    def test_hidden_is_always_disabled(self, monitor):
        policy = LayoutPolicy(PlacementConfig(hot_corners=Side.HIDDEN))
        placement = policy.resolve_hot_corner_placement(monitor)
        assert placement.action.value == "disabled"

    def test_hidden_disabled_even_for_degenerate_monitor(self):
        policy = LayoutPolicy(PlacementConfig(hot_corners=Side.HIDDEN))
        placement = policy.resolve_hot_corner_placement(MonitorRect(0, 0, 0, 0))
        assert placement.action.value == "disabled"


class TestIndicators:
    def test_hidden_indicator_is_suppressed(self):
        cfg = PlacementConfig(indicators={"a11y": Side.HIDDEN})
        assert is_indicator_suppressed("a11y", cfg) is True

    def test_shown_indicator_is_kept(self):
        cfg = PlacementConfig(indicators={"a11y": Side.SHOWN})
        assert is_indicator_suppressed("a11y", cfg) is False

    def test_unknown_indicator_is_kept(self):
        assert is_indicator_suppressed("unknown", PlacementConfig()) is False

    def test_policy_uses_its_config(self):
        assert LayoutPolicy().is_indicator_suppressed("a11y") is True


class TestArrowSides:
    def test_bottom_panel_menus_point_down(self):
        assert menu_arrow_side(Side.BOTTOM) is Side.BOTTOM

    def test_top_tray_summary_points_up(self):
        assert summary_arrow_side(Side.TOP) is Side.TOP

    def test_hidden_panel_is_unsupported(self):
        with pytest.raises(UnsupportedPlacement):
            menu_arrow_side(Side.HIDDEN)
        with pytest.raises(UnsupportedPlacement):
            summary_arrow_side(Side.SHOWN)


class TestBannerOffset:
    def test_collapsed_banner_hangs_above_tray_bottom(self):
        assert compute_banner_offset(60, 28, expanded=False) == -32

    def test_expanded_rests_at_origin(self):
        assert compute_banner_offset(60, 28, expanded=True) == 0

    def test_negative_height(self):
        with pytest.raises(InvalidGeometry):
            compute_banner_offset(-1, 28, expanded=False)


class TestConsoleRegion:
    MONITOR = MonitorRect(0, 0, 1000, 1000)

    def test_centred_at_top(self):
        region = compute_console_region(self.MONITOR)
        assert region.width == int(1000 * CONSOLE_WIDTH_RATIO)
        assert region.position == Point(150, 0)
        assert region.height == 700

    def test_leaves_room_for_keyboard(self):
        region = compute_console_region(self.MONITOR, keyboard_height=300)
        assert region.height == 630

    def test_follows_monitor_origin(self):
        region = compute_console_region(MonitorRect(1920, 100, 1000, 1000))
        assert region.position == Point(2070, 100)

    def test_degenerate_monitor(self):
        with pytest.raises(InvalidGeometry):
            compute_console_region(MonitorRect(0, 0, 0, 0))
