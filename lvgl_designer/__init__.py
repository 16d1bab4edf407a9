from .utils import *
from .models import (WidgetType, WidgetSpec, WIDGET_TYPES, WIDGET_SPECS, WIDGET_CLASSES, Widget,
                     LabelWidget, ButtonWidget, SliderWidget, CheckboxWidget, ImageWidget,
                     ArcWidget, BarWidget, RollerWidget)
from .geometry import clamp, clamp_to_canvas, to_canvas_local, step_zoom
from .factory import WidgetFactory, create_widget
from .document import Document
from .session import CanvasSettings, EditorSession
from .serializer import serialize

# Qt-side modules (scene, items, palette, properties, hud, export_dialog) are imported directly.

__all__ = [
    "WidgetType", "WidgetSpec", "WIDGET_TYPES", "WIDGET_SPECS", "WIDGET_CLASSES", "Widget",
    "LabelWidget", "ButtonWidget", "SliderWidget", "CheckboxWidget", "ImageWidget",
    "ArcWidget", "BarWidget", "RollerWidget",
    "clamp", "clamp_to_canvas", "to_canvas_local", "step_zoom",
    "WidgetFactory", "create_widget", "Document", "CanvasSettings", "EditorSession",
    "serialize", "CANVAS_W", "CANVAS_H",
]
