"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from tweakui.binding import BindingEvent, ValueSource
from tweakui.color_formats import ColorFormatRegistry
from tweakui.context import PanelContext
from tweakui.models import PanelConfig


class RecordingObserver:
    """Binding observer that remembers every event it receives."""

    def __init__(self):
        self.events: list[tuple[BindingEvent, dict]] = []

    def on_binding_event(self, event: BindingEvent, **kwargs) -> None:
        self.events.append((event, kwargs))

    @property
    def values(self) -> list:
        return [kwargs["value"] for _, kwargs in self.events]


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def registry():
    """Create an empty color format registry."""
    return ColorFormatRegistry()


@pytest.fixture
def context(registry):
    """Create a panel context with default settings and a private registry."""
    return PanelContext(PanelConfig(), registry=registry)


@pytest.fixture
def settings():
    """Plain mapping used as a binding target."""
    return {"speed": 0.5, "color": "#ff8000", "tint": [255, 128, 0]}


@pytest.fixture
def speed_source(settings):
    """Value source bound to settings['speed']."""
    return ValueSource(target=settings, property="speed", value=0.0)


@pytest.fixture
def recorder():
    """Create a recording binding observer."""
    return RecordingObserver()
