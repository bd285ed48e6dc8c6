"""Outputs as reported by xrandr and the two-output layout applied to them."""

from dataclasses import dataclass
from typing import Optional, Tuple


class ConnectionState:
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    UNKNOWN = "unknown"

    ALL = (CONNECTED, DISCONNECTED, UNKNOWN)


class Rotation:
    NORMAL = "normal"
    LEFT = "left"
    RIGHT = "right"
    INVERTED = "inverted"

    ALL = (NORMAL, LEFT, RIGHT, INVERTED)


class Relation:
    RIGHT_OF = "right-of"
    LEFT_OF = "left-of"
    ABOVE = "above"
    BELOW = "below"

    ALL = (RIGHT_OF, LEFT_OF, ABOVE, BELOW)


@dataclass(frozen=True)
class Resolution:
    width: int
    height: int
    refresh_rate: Optional[float] = None

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"

    @classmethod
    def parse(cls, text: str) -> 'Resolution':
        """Parse `WIDTHxHEIGHT`, ignoring any `+X+Y` offset suffix."""
        res_part = text.split('+')[0]
        try:
            width, height = map(int, res_part.lower().split('x'))
        except ValueError:
            raise ValueError(f"Invalid resolution: {text!r}") from None
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid resolution: {text!r}")
        return cls(width, height)


@dataclass(frozen=True)
class Output:
    name: str
    state: str = ConnectionState.UNKNOWN
    primary: bool = False
    current_mode: Optional[Resolution] = None

    @property
    def connected(self) -> bool:
        return self.state == ConnectionState.CONNECTED


@dataclass(frozen=True)
class OutputDirective:
    """One `--output` clause of an xrandr call.

    Exactly one of `position` (absolute x, y) or `relative_to`
    (relation, other output name) is set.
    """

    name: str
    mode: Resolution
    rotation: str = Rotation.NORMAL
    primary: bool = False
    position: Optional[Tuple[int, int]] = None
    relative_to: Optional[Tuple[str, str]] = None

    def __post_init__(self):
        if (self.position is None) == (self.relative_to is None):
            raise ValueError(f"{self.name}: exactly one of position or relative_to is required")


@dataclass(frozen=True)
class LayoutRule:
    """Apply a primary/secondary pair when `trigger_output` is connected."""

    trigger_output: str
    primary_output: str
    secondary_output: str
    resolution: Resolution
    rotation: str = Rotation.NORMAL
    relative_position: str = Relation.RIGHT_OF

    def __post_init__(self):
        if self.primary_output == self.secondary_output:
            raise ValueError(f"Primary and secondary output are both {self.primary_output}")
        if self.rotation not in Rotation.ALL:
            raise ValueError(f"Unsupported rotation: {self.rotation}")
        if self.relative_position not in Relation.ALL:
            raise ValueError(f"Unsupported relative position: {self.relative_position}")

    @property
    def output_names(self) -> Tuple[str, ...]:
        return tuple(dict.fromkeys((self.trigger_output, self.primary_output, self.secondary_output)))

    def plan(self) -> Tuple[OutputDirective, ...]:
        primary = OutputDirective(
            name=self.primary_output,
            mode=self.resolution,
            rotation=self.rotation,
            primary=True,
            position=(0, 0),
        )
        secondary = OutputDirective(
            name=self.secondary_output,
            mode=self.resolution,
            rotation=self.rotation,
            relative_to=(self.relative_position, self.primary_output),
        )
        return (primary, secondary)
