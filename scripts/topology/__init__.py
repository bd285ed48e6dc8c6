"""Output topology helpers for the bspwm session.

The `display` package decides, once per run, whether the secondary monitor
is attached and applies the two-monitor xrandr layout when it is.
"""

__all__ = [
    "display",
    "logging",
]
