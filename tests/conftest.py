"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def mock_host():
    """Create a mock widget host."""
    from menukit.services.host_service import MockHost
    return MockHost()


@pytest.fixture
def event_bus():
    """Create an event bus that records emitted events."""
    from menukit.events.event_bus import EventBus

    bus = EventBus()
    bus.enable_logging()
    return bus


@pytest.fixture
def menu(mock_host, event_bus):
    """Create a Menu over the mock host."""
    from menukit.menu import Menu
    return Menu(mock_host, events=event_bus)


@pytest.fixture
def sample_menu_yaml():
    """A small menu definition with dependencies."""
    return """
settings:
  safe_callbacks: true
aliases:
  feature: Aimbot
groups:
  - tab: LUA
    container: A
    elements:
      - id: enabled
        kind: checkbox
        label: "Enable {{feature}}"
      - id: mode
        kind: combobox
        label: Mode
        args: [["Off", "Legit", "Rage"]]
        depend: [enabled]
  - tab: LUA
    container: B
    elements:
      - id: fov
        kind: slider
        label: FOV
        args: [0, 180, 90]
        depend: [enabled, [mode, 2]]
      - id: targets
        kind: multiselect
        label: Targets
        args: [[Head, Chest, Legs]]
        value: [Head]
      - id: hitbox_scale
        kind: slider
        label: Head scale
        args: [0, 100, 50]
        enabled: false
        depend:
          - element: targets
            value: Head
"""
