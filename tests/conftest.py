"""Shared fixtures for the debugger tests."""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from uidebug.core.parser import parse_dump  # noqa: E402

SAMPLE_DUMP = "\n".join([
    "Attributes: Application, 0x100, pid: 42, label: 'Example'",
    "Element subtree:",
    " →Application, 0x100, pid: 42, label: 'Example'",
    "    Window (Main), 0x101, {{0.0, 0.0}, {390.0, 844.0}}",
    "        Other, 0x102, {{0.0, 0.0}, {390.0, 96.0}}, identifier: 'navigationBarView'",
    "            Button, 0x103, {{8.0, 50.0}, {44.0, 44.0}}, identifier: 'leadingButton', label: 'Back'",
    "            StaticText, 0x104, {{150.0, 60.0}, {90.0, 20.0}}, label: 'Settings'",
    "        Table, 0x105, {{0.0, 96.0}, {390.0, 748.0}}, identifier: 'settingsTable'",
    "            Cell, 0x106, {{0.0, 96.0}, {390.0, 44.0}}, identifier: 'cell'",
    "                StaticText, 0x107, {{16.0, 108.0}, {60.0, 20.0}}, label: 'Wi-Fi'",
    "            Cell, 0x108, {{0.0, 140.0}, {390.0, 44.0}}, identifier: 'cell'",
    "                Switch, 0x109, {{320.0, 146.0}, {51.0, 31.0}}, identifier: 'toggle', label: 'Bluetooth', value: 1",
    "Path to element:",
])


@pytest.fixture
def sample_dump() -> str:
    """Dump of a settings screen with a navigation bar and a two-cell table."""

    return SAMPLE_DUMP


@pytest.fixture
def sample_records(sample_dump):
    return parse_dump(sample_dump)
