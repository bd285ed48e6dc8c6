"""Errors raised at the xrandr query and apply boundaries."""

from typing import Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .layout import OutputDirective


class TopologyError(Exception):
    pass


class QueryError(TopologyError):
    """The display server could not be asked for its outputs."""


class ApplyError(TopologyError):
    """The display server rejected or failed the layout request.

    `output`, `mode` and `rotation` name the offending plan entry when xrandr
    identified one; otherwise `requested` lists every entry of the plan.
    """

    def __init__(
        self,
        detail: str,
        output: Optional[str] = None,
        mode: Optional[str] = None,
        rotation: Optional[str] = None,
        requested: Sequence['OutputDirective'] = (),
    ):
        self.detail = detail
        self.output = output
        self.mode = mode
        self.rotation = rotation
        self.requested = tuple(requested)
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.output:
            target = f"{self.output} ({self.mode} {self.rotation})"
        elif self.requested:
            target = ", ".join(f"{d.name} ({d.mode} {d.rotation})" for d in self.requested)
        else:
            target = "layout"
        return f"failed to apply {target}: {self.detail}"
