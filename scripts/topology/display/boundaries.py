from abc import ABC, abstractmethod
from typing import List, Sequence

from .layout import Output, OutputDirective


class OutputQuery(ABC):
    @abstractmethod
    def list_outputs(self) -> List[Output]:
        """Return every output the display server reports, in its order.

        Raises QueryError when the server cannot be reached.
        """


class LayoutApplier(ABC):
    @abstractmethod
    def apply(self, plan: Sequence[OutputDirective]) -> None:
        """Replace the current layout with `plan` in a single request.

        Raises ApplyError when the request is rejected.
        """
