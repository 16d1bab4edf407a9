"""Tests for the widget catalog and widget creation."""

import pytest

from lvgl_designer.factory import WidgetFactory, create_widget
from lvgl_designer.models import (
    GEOMETRY_FIELDS,
    WIDGET_CLASSES,
    WIDGET_SPECS,
    WIDGET_TYPES,
    RollerWidget,
    SliderWidget,
    WidgetType,
)

EXPECTED = {
    "label": (50, 30, {"text": "Label"}),
    "button": (50, 30, {"text": "Button"}),
    "slider": (100, 30, {"value": 50, "min_value": 0, "max_value": 100}),
    "checkbox": (50, 30, {"checked": False}),
    "image": (50, 30, {"src": ""}),
    "arc": (50, 50, {"value": 70, "min_value": 0, "max_value": 100,
                     "start_angle": 0, "end_angle": 270}),
    "bar": (100, 30, {"value": 50, "min_value": 0, "max_value": 100}),
    "roller": (50, 30, {"options": "Option 1\nOption 2\nOption 3", "value": 0}),
}


class TestCatalog:
    """The widget catalog is closed and every type has a schema and a class."""

    def test_catalog_is_the_eight_types(self):
        assert set(WIDGET_TYPES) == set(EXPECTED)
        assert set(WIDGET_SPECS) == set(WIDGET_TYPES)
        assert set(WIDGET_CLASSES) == set(WIDGET_TYPES)

    def test_class_type_tags_match(self):
        for widget_type, cls in WIDGET_CLASSES.items():
            assert cls.type == widget_type

    def test_creation_defaults_match_class_fields(self):
        for widget_type, spec in WIDGET_SPECS.items():
            assert set(spec.defaults) == set(WIDGET_CLASSES[widget_type].attribute_names())


class TestCreateWidget:
    """Test create_widget() per-type defaults and drop centering."""

    @pytest.mark.parametrize("widget_type", sorted(EXPECTED))
    def test_sets_exactly_the_type_fields(self, widget_type):
        width, height, attrs = EXPECTED[widget_type]
        widget = create_widget(widget_type, (160, 120), "w1")

        assert widget.type == widget_type
        assert (widget.width, widget.height) == (width, height)
        assert widget.attributes() == attrs

    def test_slider_drop_scenario(self):
        """Slider dropped at (100, 100) lands at (50, 85) with its defaults."""
        widget = create_widget(WidgetType.SLIDER, (100, 100), "s")

        assert isinstance(widget, SliderWidget)
        assert (widget.x, widget.y) == (50, 85)
        assert (widget.width, widget.height) == (100, 30)
        assert (widget.value, widget.min_value, widget.max_value) == (50, 0, 100)

    def test_drop_near_origin_clamps_to_zero(self):
        widget = create_widget(WidgetType.ARC, (5, 10), "a")
        assert (widget.x, widget.y) == (0, 0)

    def test_fractional_drop_point_is_rounded(self):
        widget = create_widget(WidgetType.LABEL, (100.4, 50.6), "l")
        assert (widget.x, widget.y) == (75, 36)

    def test_unknown_type_is_rejected(self):
        with pytest.raises(ValueError):
            create_widget("spinner", (0, 0), "x")

    def test_widgets_do_not_share_attribute_state(self):
        a = create_widget(WidgetType.ROLLER, (50, 50), "a")
        b = create_widget(WidgetType.ROLLER, (50, 50), "b")
        a.options = "X"
        assert isinstance(b, RollerWidget)
        assert b.options == "Option 1\nOption 2\nOption 3"


class TestWidgetFactory:
    """WidgetFactory issues fresh ids."""

    def test_ids_are_unique_and_typed(self):
        factory = WidgetFactory()
        ids = [factory.create(t, (100, 100)).id for t in WIDGET_TYPES]

        assert len(set(ids)) == len(ids)
        assert ids[0] == "label_1"
        assert ids[2] == "slider_3"

    def test_display_attributes_are_detached(self):
        widget = WidgetFactory().create(WidgetType.BUTTON, (100, 100))
        attrs = widget.display_attributes()
        attrs["text"] = "changed"

        assert widget.text == "Button"
        assert set(attrs) == {"type", "id", *GEOMETRY_FIELDS, "text"}
