"""Pytest fixtures for display topology tests."""

from typing import List, Sequence, Tuple

import pytest

from topology.display.boundaries import LayoutApplier, OutputQuery
from topology.display.layout import ConnectionState, Output, OutputDirective


class FakeQuery(OutputQuery):
    def __init__(self, outputs: Sequence[Tuple[str, str]] = (), error: Exception = None):
        self.outputs = [Output(name=name, state=state) for name, state in outputs]
        self.error = error
        self.calls = 0

    def list_outputs(self) -> List[Output]:
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.outputs)


class RecordingApplier(LayoutApplier):
    def __init__(self, error: Exception = None):
        self.plans: List[Tuple[OutputDirective, ...]] = []
        self.error = error

    def apply(self, plan: Sequence[OutputDirective]) -> None:
        self.plans.append(tuple(plan))
        if self.error:
            raise self.error


CONNECTED = ConnectionState.CONNECTED
DISCONNECTED = ConnectionState.DISCONNECTED
UNKNOWN = ConnectionState.UNKNOWN


@pytest.fixture
def applier() -> RecordingApplier:
    return RecordingApplier()


XRANDR_QUERY_DOCKED = """\
Screen 0: minimum 320 x 200, current 5120 x 1440, maximum 16384 x 16384
eDP-1 connected (normal left inverted right x axis y axis)
   1920x1080     60.01 +  59.97
DP-1 connected primary 2560x1440+0+0 (normal left inverted right x axis y axis) 597mm x 336mm
   2560x1440     59.95*+
   1920x1080     60.00    50.00
DP-2 connected 2560x1440+2560+0 (normal left inverted right x axis y axis) 597mm x 336mm
   2560x1440     59.95*+
HDMI-1 disconnected (normal left inverted right x axis y axis)
VIRTUAL1 unknown connection (normal left inverted right x axis y axis)
"""

XRANDR_QUERY_LEGACY_UNDOCKED = """\
Screen 0: minimum 8 x 8, current 2560 x 1440, maximum 32767 x 32767
DP1 connected primary 2560x1440+0+0 (normal left inverted right x axis y axis) 597mm x 336mm
   2560x1440     59.95*+
DP2 disconnected (normal left inverted right x axis y axis)
HDMI1 disconnected (normal left inverted right x axis y axis)
"""
