"""Output detection through `xrandr --query`."""

import subprocess
from typing import List, Optional

from topology.logging import Logger
from .boundaries import OutputQuery
from .config import DisplayConfig
from .errors import QueryError
from .layout import ConnectionState, Output, Resolution

logger = Logger(__name__)


def parse_outputs(xrandr_output: str) -> List[Output]:
    """Parse the connector header lines of `xrandr --query` output.

    Mode lines (indented) and the `Screen N:` summary are skipped.
    """
    outputs: List[Output] = []

    for line in xrandr_output.splitlines():
        if not line or line[0].isspace() or line.startswith('Screen '):
            continue

        parts = line.split()
        if len(parts) < 2 or parts[1] not in ConnectionState.ALL:
            continue

        name, state = parts[0], parts[1]
        primary = 'primary' in parts[2:]

        current_mode: Optional[Resolution] = None
        for part in parts[2:]:
            if 'x' in part and '+' in part:
                try:
                    current_mode = Resolution.parse(part)
                except ValueError:
                    logger.debug(f"Ignoring unparsable geometry {part!r} on {name}")
                break

        outputs.append(Output(name=name, state=state, primary=primary, current_mode=current_mode))

    return outputs


class XrandrOutputQuery(OutputQuery):
    def __init__(self, binary: str = DisplayConfig.XRANDR_BINARY, timeout: float = DisplayConfig.QUERY_TIMEOUT_SECONDS):
        self.logger = logger
        self.binary = binary
        self.timeout = timeout

    def get_xrandr_output(self) -> str:
        cmd = [self.binary, '--query']
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=True, timeout=self.timeout)
        except FileNotFoundError:
            raise QueryError(f"{self.binary} not found; is it installed?") from None
        except subprocess.TimeoutExpired as e:
            raise QueryError(f"{self.binary} --query timed out after {self.timeout}s") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise QueryError(f"{self.binary} --query failed (exit {e.returncode}): {stderr}") from e
        return result.stdout

    def list_outputs(self) -> List[Output]:
        outputs = parse_outputs(self.get_xrandr_output())
        connected = [o.name for o in outputs if o.connected]
        self.logger.debug(f"Detected {len(outputs)} output(s), connected: {', '.join(connected) or 'none'}")
        return outputs
