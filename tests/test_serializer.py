"""Tests for the ESPHome YAML serializer."""

import yaml

from lvgl_designer.factory import create_widget
from lvgl_designer.models import WidgetType
from lvgl_designer.serializer import (
    DISPLAY_PREAMBLE,
    WIDGETS_HEADER,
    background_block,
    normalize_hex,
    quote_text,
    serialize,
    widget_block,
)
from lvgl_designer.session import CanvasSettings


def _block_lines(widget):
    return widget_block(widget).split("\n")


def _widget_ids(text):
    return [line.split(": ", 1)[1] for line in text.splitlines() if line.startswith("    id: ")
            and not line.endswith("tft_display")]


class TestDocumentLayout:
    def test_empty_document_is_preamble_only(self, settings):
        text = serialize([], settings)
        assert text == DISPLAY_PREAMBLE + background_block(settings.background_color) + WIDGETS_HEADER
        assert "type:" not in text

    def test_preamble_is_static(self):
        a = serialize([], CanvasSettings(background_color="#000000"))
        b = serialize([], CanvasSettings(background_color="#ffffff"))
        assert a.startswith(DISPLAY_PREAMBLE) and b.startswith(DISPLAY_PREAMBLE)
        assert "platform: ili9341" in DISPLAY_PREAMBLE
        assert "platform: xpt2046" in DISPLAY_PREAMBLE

    def test_deterministic(self, populated, settings):
        document, _ = populated
        assert serialize(document.snapshot(), settings) == serialize(document.snapshot(), settings)

    def test_widgets_in_document_order(self, populated, settings):
        document, (label, slider, roller) = populated
        before = serialize(document.snapshot(), settings)
        assert _widget_ids(before) == [label.id, slider.id, roller.id]

        document.reorder_widget(roller.id, 0)
        after = serialize(document.snapshot(), settings)
        assert _widget_ids(after) == [roller.id, label.id, slider.id]
        for widget in document.snapshot():
            assert widget_block(widget) in before
            assert widget_block(widget) in after
        assert before != after

    def test_zoom_does_not_change_output(self, populated):
        document, _ = populated
        assert serialize(document.snapshot(), CanvasSettings(zoom=1.0)) == \
            serialize(document.snapshot(), CanvasSettings(zoom=2.6))


class TestBackgroundColor:
    def test_hash_stripped_case_preserved(self):
        assert "lv_color_hex(0x1e293b)" in serialize([], CanvasSettings(background_color="1e293b"))
        assert "lv_color_hex(0x1E293B)" in serialize([], CanvasSettings(background_color="#1E293B"))

    def test_only_one_hash_is_stripped(self):
        assert normalize_hex("##abc") == "#abc"
        assert "lv_color_hex(0x#abc)" in serialize([], CanvasSettings(background_color="##abc"))

    def test_malformed_passes_through(self):
        assert normalize_hex("#zz-12") == "zz-12"
        assert "lv_color_hex(0xnot a color)" in serialize([], CanvasSettings(background_color="not a color"))


class TestWidgetBlocks:
    def test_common_header(self):
        widget = create_widget(WidgetType.IMAGE, (100, 100), "image_1")
        assert _block_lines(widget)[:7] == [
            "  - platform: lvgl",
            "    type: image",
            "    id: image_1",
            "    x: 75",
            "    y: 85",
            "    width: 50",
            "    height: 30",
        ]

    def test_image_emits_no_src(self):
        widget = create_widget(WidgetType.IMAGE, (100, 100), "image_1")
        widget.src = "logo.png"
        block = widget_block(widget)
        assert "src" not in block
        assert "logo.png" not in block
        assert block.endswith("    height: 30\n\n")

    def test_label_text(self):
        widget = create_widget(WidgetType.LABEL, (100, 100), "label_1")
        assert '    text: "Label"' in _block_lines(widget)

    def test_slider_and_bar_fields(self):
        for widget_type in (WidgetType.SLIDER, WidgetType.BAR):
            widget = create_widget(widget_type, (100, 100), "w")
            assert _block_lines(widget)[7:10] == [
                "    min_value: 0",
                "    max_value: 100",
                "    value: 50",
            ]

    def test_arc_fields(self):
        widget = create_widget(WidgetType.ARC, (100, 100), "arc_1")
        assert _block_lines(widget)[7:12] == [
            "    min_value: 0",
            "    max_value: 100",
            "    value: 70",
            "    start_angle: 0",
            "    end_angle: 270",
        ]

    def test_checkbox_boolean_token(self):
        widget = create_widget(WidgetType.CHECKBOX, (100, 100), "cb")
        assert "    checked: false" in _block_lines(widget)
        widget.checked = True
        assert "    checked: true" in _block_lines(widget)

    def test_roller_options_keep_empty_lines(self):
        widget = create_widget(WidgetType.ROLLER, (100, 100), "roller_1")
        widget.options = "A\nB\n\nC"
        widget.value = 2
        assert _block_lines(widget)[7:13] == [
            "    options: |2",
            "      A",
            "      B",
            "      ",
            "      C",
            "    selected: 2",
        ]

    def test_roller_options_parse_back(self):
        widget = create_widget(WidgetType.ROLLER, (100, 100), "roller_1")
        widget.options = "A\nB\n\nC"
        parsed = yaml.safe_load(widget_block(widget))[0]
        assert parsed["options"] == "A\nB\n\nC\n"
        assert parsed["selected"] == 0

    def test_roller_leading_spaces_survive(self):
        """A first option indented deeper than the rest still parses verbatim."""
        widget = create_widget(WidgetType.ROLLER, (100, 100), "r")
        widget.options = "  padded  \nnext"
        lines = _block_lines(widget)
        assert lines[8] == "        padded  "
        assert lines[9] == "      next"
        assert yaml.safe_load(widget_block(widget))[0]["options"].rstrip("\n") == "  padded  \nnext"

    def test_unset_fields_use_fallbacks(self):
        widget = create_widget(WidgetType.ARC, (100, 100), "arc_1")
        widget.value = None
        widget.end_angle = None
        lines = _block_lines(widget)
        assert "    value: 0" in lines
        assert "    end_angle: 270" in lines
        label = create_widget(WidgetType.LABEL, (100, 100), "l")
        label.text = None
        assert '    text: ""' in _block_lines(label)

    def test_geometry_is_not_reclamped(self):
        widget = create_widget(WidgetType.LABEL, (0, 0), "l")
        widget.width = 500
        widget.x = 0
        lines = _block_lines(widget)
        assert "    width: 500" in lines
        assert "    x: 0" in lines


class TestTextQuoting:
    def test_quotes_and_newlines_are_escaped(self):
        quoted = quote_text('say "hi"\nback\\slash')
        assert "\n" not in quoted
        assert yaml.safe_load(f"text: {quoted}")["text"] == 'say "hi"\nback\\slash'

    def test_non_ascii_round_trips(self):
        quoted = quote_text("Temp: 21 °C ✓")
        assert quoted.isascii()
        assert yaml.safe_load(f"text: {quoted}")["text"] == "Temp: 21 °C ✓"

    def test_text_line_does_not_break_block(self):
        widget = create_widget(WidgetType.BUTTON, (100, 100), "b")
        widget.text = 'line1\nline2 "x"'
        block = widget_block(widget)
        text_lines = [line for line in block.split("\n") if line.startswith("    text: ")]
        assert len(text_lines) == 1
        assert yaml.safe_load(text_lines[0].strip())["text"] == 'line1\nline2 "x"'

    def test_empty_and_long_text_stay_on_one_line(self):
        assert quote_text("") == '""'
        long_text = "word " * 60
        quoted = quote_text(long_text)
        assert "\n" not in quoted
        assert yaml.safe_load(f"text: {quoted}")["text"] == long_text

    def test_whole_widget_block_is_valid_yaml(self):
        widget = create_widget(WidgetType.LABEL, (100, 100), "label_1")
        widget.text = "a: b # not a comment"
        parsed = yaml.safe_load(widget_block(widget))
        assert parsed == [{
            "platform": "lvgl", "type": "label", "id": "label_1",
            "x": 75, "y": 85, "width": 50, "height": 30,
            "text": "a: b # not a comment",
        }]
