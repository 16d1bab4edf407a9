from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Dict, Tuple, Type


class WidgetType:
    LABEL = "label"
    BUTTON = "button"
    SLIDER = "slider"
    CHECKBOX = "checkbox"
    IMAGE = "image"
    ARC = "arc"
    BAR = "bar"
    ROLLER = "roller"


WIDGET_TYPES: Tuple[str, ...] = (
    WidgetType.LABEL, WidgetType.BUTTON, WidgetType.SLIDER, WidgetType.CHECKBOX,
    WidgetType.IMAGE, WidgetType.ARC, WidgetType.BAR, WidgetType.ROLLER,
)

GEOMETRY_FIELDS: Tuple[str, ...] = ("x", "y", "width", "height")


@dataclass(frozen=True)
class WidgetSpec:
    """Per-type schema shared by widget creation and the serializer.

    ``defaults`` are the attribute values a freshly dropped widget gets;
    ``fallbacks`` are what the serializer writes when an attribute is unset.
    """
    type: str
    title: str
    width: int
    height: int
    defaults: Dict[str, Any]
    fallbacks: Dict[str, Any]


_RANGE_FALLBACKS = {"min_value": 0, "max_value": 100, "value": 0}

WIDGET_SPECS: Dict[str, WidgetSpec] = {
    WidgetType.LABEL: WidgetSpec(WidgetType.LABEL, "Label", 50, 30,
                                 {"text": "Label"}, {"text": ""}),
    WidgetType.BUTTON: WidgetSpec(WidgetType.BUTTON, "Button", 50, 30,
                                  {"text": "Button"}, {"text": ""}),
    WidgetType.SLIDER: WidgetSpec(WidgetType.SLIDER, "Slider", 100, 30,
                                  {"value": 50, "min_value": 0, "max_value": 100},
                                  dict(_RANGE_FALLBACKS)),
    WidgetType.CHECKBOX: WidgetSpec(WidgetType.CHECKBOX, "Checkbox", 50, 30,
                                    {"checked": False}, {"checked": False}),
    WidgetType.IMAGE: WidgetSpec(WidgetType.IMAGE, "Image", 50, 30,
                                 {"src": ""}, {"src": ""}),
    WidgetType.ARC: WidgetSpec(WidgetType.ARC, "Arc", 50, 50,
                               {"value": 70, "min_value": 0, "max_value": 100,
                                "start_angle": 0, "end_angle": 270},
                               dict(_RANGE_FALLBACKS, start_angle=0, end_angle=270)),
    WidgetType.BAR: WidgetSpec(WidgetType.BAR, "Bar", 100, 30,
                               {"value": 50, "min_value": 0, "max_value": 100},
                               dict(_RANGE_FALLBACKS)),
    WidgetType.ROLLER: WidgetSpec(WidgetType.ROLLER, "Roller", 50, 30,
                                  {"options": "Option 1\nOption 2\nOption 3", "value": 0},
                                  {"options": "", "value": 0}),
}


@dataclass
class Widget:
    id: str
    x: int
    y: int
    width: int
    height: int

    type: ClassVar[str] = ""

    @property
    def spec(self) -> WidgetSpec:
        return WIDGET_SPECS[self.type]

    @classmethod
    def attribute_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if f.name != "id" and f.name not in GEOMETRY_FIELDS)

    @classmethod
    def field_kind(cls, name: str) -> str:
        # annotations are strings under postponed evaluation: "int" | "str" | "bool"
        for f in fields(cls):
            if f.name == name:
                return f.type if isinstance(f.type, str) else f.type.__name__
        return ""

    def attributes(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.attribute_names()}

    def display_attributes(self) -> Dict[str, Any]:
        """Detached description handed to the rendering layer."""
        out: Dict[str, Any] = {"type": self.type, "id": self.id}
        for name in GEOMETRY_FIELDS:
            out[name] = getattr(self, name)
        out.update(self.attributes())
        return out


@dataclass
class LabelWidget(Widget):
    text: str
    type: ClassVar[str] = WidgetType.LABEL


@dataclass
class ButtonWidget(Widget):
    text: str
    type: ClassVar[str] = WidgetType.BUTTON


@dataclass
class SliderWidget(Widget):
    value: int
    min_value: int
    max_value: int
    type: ClassVar[str] = WidgetType.SLIDER


@dataclass
class CheckboxWidget(Widget):
    checked: bool
    type: ClassVar[str] = WidgetType.CHECKBOX


@dataclass
class ImageWidget(Widget):
    src: str
    type: ClassVar[str] = WidgetType.IMAGE


@dataclass
class ArcWidget(Widget):
    value: int
    min_value: int
    max_value: int
    start_angle: int
    end_angle: int
    type: ClassVar[str] = WidgetType.ARC


@dataclass
class BarWidget(Widget):
    value: int
    min_value: int
    max_value: int
    type: ClassVar[str] = WidgetType.BAR


@dataclass
class RollerWidget(Widget):
    options: str
    value: int
    type: ClassVar[str] = WidgetType.ROLLER


WIDGET_CLASSES: Dict[str, Type[Widget]] = {
    cls.type: cls for cls in (LabelWidget, ButtonWidget, SliderWidget, CheckboxWidget,
                              ImageWidget, ArcWidget, BarWidget, RollerWidget)
}
