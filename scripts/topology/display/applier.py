import subprocess
from typing import List, Optional, Sequence

from topology.logging import Logger
from .boundaries import LayoutApplier
from .config import DisplayConfig
from .errors import ApplyError
from .layout import OutputDirective

logger = Logger(__name__)


class XrandrCommandGenerator:
    def __init__(self, binary: str = DisplayConfig.XRANDR_BINARY):
        self.binary = binary

    def directive_args(self, directive: OutputDirective) -> List[str]:
        args = ['--output', directive.name]
        if directive.primary:
            args.append('--primary')
        args += ['--mode', str(directive.mode), '--rotate', directive.rotation]
        if directive.position is not None:
            x, y = directive.position
            args += ['--pos', f"{x}x{y}"]
        else:
            relation, other = directive.relative_to
            args += [f"--{relation}", other]
        return args

    def generate_command(self, plan: Sequence[OutputDirective]) -> List[str]:
        if not plan:
            raise ValueError("Cannot build an xrandr command for an empty plan")
        cmd = [self.binary]
        for directive in plan:
            cmd += self.directive_args(directive)
        return cmd


class XrandrLayoutApplier(LayoutApplier):
    def __init__(self, binary: str = DisplayConfig.XRANDR_BINARY, timeout: float = DisplayConfig.APPLY_TIMEOUT_SECONDS):
        self.logger = logger
        self.binary = binary
        self.timeout = timeout
        self.generator = XrandrCommandGenerator(binary)

    def apply(self, plan: Sequence[OutputDirective]) -> None:
        cmd = self.generator.generate_command(plan)
        self.logger.debug(f"Running: {' '.join(cmd)}")
        try:
            subprocess.run(cmd, capture_output=True, text=True, check=True, timeout=self.timeout)
        except FileNotFoundError:
            raise ApplyError(f"{self.binary} not found", requested=plan) from None
        except subprocess.TimeoutExpired as e:
            raise ApplyError(f"timed out after {self.timeout}s", requested=plan) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip() or f"exit status {e.returncode}"
            culprit = self._find_culprit(plan, stderr)
            if culprit:
                raise ApplyError(
                    stderr,
                    output=culprit.name,
                    mode=str(culprit.mode),
                    rotation=culprit.rotation,
                    requested=plan,
                ) from e
            raise ApplyError(stderr, requested=plan) from e

    def _find_culprit(self, plan: Sequence[OutputDirective], stderr: str) -> Optional[OutputDirective]:
        # e.g. "warning: output DP-2 not found; ignoring"
        tokens = {token.strip('"\'.,:;') for token in stderr.split()}
        for directive in plan:
            if directive.name in tokens:
                return directive
        return None
