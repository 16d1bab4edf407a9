"""Tests for canvas coordinate mapping, clamping and zoom stepping."""

import pytest

from lvgl_designer.geometry import (
    clamp,
    clamp_to_canvas,
    drag_offset,
    drop_position,
    step_zoom,
    to_canvas_local,
    wheel_zoom_delta,
)
from lvgl_designer.session import CanvasSettings


class TestToCanvasLocal:
    def test_identity_at_zoom_one(self):
        assert to_canvas_local((150, 90), (50, 40), 1.0) == (100, 50)

    def test_divides_by_zoom(self):
        assert to_canvas_local((250, 160), (50, 40), 2.0) == (100, 60)

    def test_half_zoom(self):
        assert to_canvas_local((100, 100), (0, 0), 0.5) == (200, 200)


class TestClampToCanvas:
    def test_inside_is_unchanged(self):
        assert clamp_to_canvas(10, 20, 50, 30) == (10, 20)

    def test_clamps_both_edges(self):
        assert clamp_to_canvas(-5, -1, 50, 30) == (0, 0)
        assert clamp_to_canvas(400, 300, 50, 30) == (270, 210)

    def test_oversized_widget_pins_to_origin(self):
        assert clamp_to_canvas(10, 10, 500, 300) == (0, 0)

    def test_custom_canvas(self):
        assert clamp_to_canvas(100, 100, 10, 10, 64, 48) == (54, 38)

    def test_returns_ints(self):
        x, y = clamp_to_canvas(12.6, 7.2, 50, 30)
        assert (x, y) == (13, 7)
        assert isinstance(x, int) and isinstance(y, int)

    @pytest.mark.parametrize("zoom", [0.5, 0.7, 1.0, 1.8, 3.0])
    @pytest.mark.parametrize("pointer", [(-200, -200), (0, 0), (333, 71), (1200, 900)])
    @pytest.mark.parametrize("size", [(50, 30), (100, 30), (50, 50), (320, 240)])
    def test_mapped_then_clamped_stays_on_canvas(self, zoom, pointer, size):
        width, height = size
        lx, ly = to_canvas_local(pointer, (17, 23), zoom)
        x, y = clamp_to_canvas(lx, ly, width, height)
        assert 0 <= x <= 320 - width
        assert 0 <= y <= 240 - height


class TestHelpers:
    def test_clamp_lower_bound_wins_on_empty_range(self):
        assert clamp(5, 0, -10) == 0

    def test_drop_position_centres_on_point(self):
        assert drop_position((100, 100), 100, 30) == (50, 85)

    def test_drag_offset_is_local(self):
        assert drag_offset((60, 45), (50, 40)) == (10, 5)


class TestZoom:
    """Zoom stepping is bounded to [0.5, 3.0] and reset is exact."""

    def test_step_zoom_bounds(self):
        assert step_zoom(2.9, 0.2) == 3.0
        assert step_zoom(0.6, -0.2) == 0.5
        assert step_zoom(1.0, 0.2) == pytest.approx(1.2)

    def test_repeated_zoom_in_saturates(self):
        settings = CanvasSettings()
        for _ in range(20):
            settings.zoom_in()
        assert settings.zoom == 3.0

    def test_repeated_zoom_out_saturates(self):
        settings = CanvasSettings()
        for _ in range(20):
            settings.zoom_out()
        assert settings.zoom == 0.5

    def test_reset_is_exactly_one(self):
        settings = CanvasSettings()
        settings.zoom_in()
        settings.zoom_in()
        settings.zoom_out()
        assert settings.reset_zoom() == 1.0
        assert settings.zoom == 1.0

    def test_wheel_direction_maps_to_one_step(self):
        assert wheel_zoom_delta(120) == pytest.approx(0.2)
        assert wheel_zoom_delta(-120) == pytest.approx(-0.2)

    def test_horizontal_wheel_does_not_zoom(self):
        settings = CanvasSettings()
        assert wheel_zoom_delta(0) == 0
        settings.set_zoom(wheel_zoom_delta(0))
        assert settings.zoom == 1.0
