"""Shared fixtures for the core tests (no Qt required)."""

import pytest

from lvgl_designer.document import Document
from lvgl_designer.factory import WidgetFactory
from lvgl_designer.session import CanvasSettings, EditorSession


@pytest.fixture
def factory() -> WidgetFactory:
    return WidgetFactory()


@pytest.fixture
def document() -> Document:
    return Document()


@pytest.fixture
def settings() -> CanvasSettings:
    return CanvasSettings()


@pytest.fixture
def session() -> EditorSession:
    return EditorSession()


@pytest.fixture
def populated(document, factory):
    """Document holding a label, a slider and a roller, in that order."""
    label = document.add_widget(factory.create("label", (40, 40)))
    slider = document.add_widget(factory.create("slider", (150, 100)))
    roller = document.add_widget(factory.create("roller", (200, 200)))
    return document, (label, slider, roller)
