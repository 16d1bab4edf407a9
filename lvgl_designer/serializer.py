"""ESPHome/LVGL YAML export.

The output is built line by line so the layout is fully under our control and
byte-identical for identical input. Geometry is written as stored; placement
bounds are the document's job, not the exporter's.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List

import yaml

from .models import Widget, WidgetType

if TYPE_CHECKING:
    from .session import CanvasSettings

DISPLAY_PREAMBLE = """\
# ESPHome LVGL Display Configuration
# Generated by ESPHome LVGL Widget Designer

display:
  - platform: ili9341
    model: TFT_2.4
    cs_pin: GPIO5
    dc_pin: GPIO16
    led_pin: GPIO2
    reset_pin: GPIO17
    rotation: 0
    update_interval: 16ms

  - platform: lvgl
    id: tft_display
    display: ili9341
    buffer_size: 32KB
    touchscreens:
      - platform: xpt2046
        id: touchscreen
        cs_pin: GPIO27
        irq_pin: GPIO25
        calibration_x_min: 3800
        calibration_x_max: 240
        calibration_y_min: 3800
        calibration_y_max: 240
        swap_xy: false
        invert_x: false
        invert_y: false

"""

WIDGETS_HEADER = "# Widget Definitions\n"


def quote_text(text: str) -> str:
    """Single-line YAML double-quoted scalar; line breaks and non-ASCII are escaped."""
    dumped = yaml.safe_dump(text, default_style='"', allow_unicode=False, width=float("inf"))
    return dumped.partition("\n")[0]


def normalize_hex(color: str) -> str:
    """Drop one leading '#'; anything else (case, bad digits) passes through."""
    return color[1:] if color.startswith("#") else color


def background_block(color: str) -> str:
    return (
        "    # Set background color\n"
        "    on_setup:\n"
        "      then:\n"
        "        - lambda: |\n"
        f"            lv_obj_set_style_bg_color(lv_scr_act(), lv_color_hex(0x{normalize_hex(color)}), 0);\n"
        "            lv_obj_set_style_bg_opa(lv_scr_act(), LV_OPA_COVER, 0);\n"
        "\n"
    )


def _attr(widget: Widget, name: str) -> Any:
    value = getattr(widget, name, None)
    if value is None:
        return widget.spec.fallbacks.get(name)
    return value


def _text_fields(widget: Widget) -> List[str]:
    text = _attr(widget, "text")
    return [f"    text: {quote_text(text or '')}"]


def _range_fields(widget: Widget) -> List[str]:
    return [
        f"    min_value: {_attr(widget, 'min_value')}",
        f"    max_value: {_attr(widget, 'max_value')}",
        f"    value: {_attr(widget, 'value')}",
    ]


def _checkbox_fields(widget: Widget) -> List[str]:
    return [f"    checked: {'true' if _attr(widget, 'checked') else 'false'}"]


def _arc_fields(widget: Widget) -> List[str]:
    return _range_fields(widget) + [
        f"    start_angle: {_attr(widget, 'start_angle')}",
        f"    end_angle: {_attr(widget, 'end_angle')}",
    ]


def _roller_fields(widget: Widget) -> List[str]:
    # explicit indentation keeps leading spaces of the first option verbatim
    lines = ["    options: |2"]
    for option in (_attr(widget, "options") or "").split("\n"):
        lines.append(f"      {option}")
    lines.append(f"    selected: {_attr(widget, 'value')}")
    return lines


def _no_fields(widget: Widget) -> List[str]:
    # image: src is collected in the editor but not exported
    return []


FIELD_EMITTERS: Dict[str, Callable[[Widget], List[str]]] = {
    WidgetType.LABEL: _text_fields,
    WidgetType.BUTTON: _text_fields,
    WidgetType.SLIDER: _range_fields,
    WidgetType.BAR: _range_fields,
    WidgetType.CHECKBOX: _checkbox_fields,
    WidgetType.ARC: _arc_fields,
    WidgetType.ROLLER: _roller_fields,
    WidgetType.IMAGE: _no_fields,
}


def widget_block(widget: Widget) -> str:
    lines = [
        "  - platform: lvgl",
        f"    type: {widget.type}",
        f"    id: {widget.id}",
        f"    x: {widget.x}",
        f"    y: {widget.y}",
        f"    width: {widget.width}",
        f"    height: {widget.height}",
    ]
    lines.extend(FIELD_EMITTERS.get(widget.type, _no_fields)(widget))
    lines.append("")
    return "\n".join(lines) + "\n"


def serialize(widgets: Iterable[Widget], settings: "CanvasSettings") -> str:
    parts = [DISPLAY_PREAMBLE, background_block(settings.background_color), WIDGETS_HEADER]
    parts.extend(widget_block(w) for w in widgets)
    return "".join(parts)
