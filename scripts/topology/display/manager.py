"""Topology configurator - decides and applies the two-output layout."""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from topology.logging import Logger
from .applier import XrandrLayoutApplier
from .boundaries import LayoutApplier, OutputQuery
from .config import DisplayConfig, select_rule
from .detector import XrandrOutputQuery
from .layout import LayoutRule, Output, OutputDirective

logger = Logger(__name__)


@dataclass(frozen=True)
class ReconcileResult:
    rule: LayoutRule
    plan: Optional[Tuple[OutputDirective, ...]] = None

    @property
    def applied(self) -> bool:
        return self.plan is not None


class TopologyConfigurator:
    """One-shot check-and-apply against the current display session.

    Holds no display state between calls: every `reconcile()` queries afresh.
    Running several configurators against one session at once is unsupported;
    the apply is a global mutation and the last writer wins.
    """

    def __init__(
        self,
        query: Optional[OutputQuery] = None,
        applier: Optional[LayoutApplier] = None,
        rules: Sequence[LayoutRule] = DisplayConfig.RULES,
    ):
        self.logger = logger
        self.query = query or XrandrOutputQuery()
        self.applier = applier or XrandrLayoutApplier()
        self.rules = tuple(rules)

    @staticmethod
    def trigger_available(rule: LayoutRule, outputs: Sequence[Output]) -> bool:
        return any(o.name == rule.trigger_output and o.connected for o in outputs)

    def reconcile(self) -> ReconcileResult:
        outputs = self.query.list_outputs()
        rule = select_rule(outputs, self.rules)
        self.logger.debug(f"Using layout rule for trigger {rule.trigger_output}")

        if not self.trigger_available(rule, outputs):
            self.logger.info(f"{rule.trigger_output} not connected, leaving layout unchanged")
            return ReconcileResult(rule=rule)

        plan = rule.plan()
        self.logger.info(
            f"{rule.trigger_output} connected, applying {rule.primary_output} + {rule.secondary_output} "
            f"at {rule.resolution} ({rule.rotation}, {rule.relative_position})"
        )
        self.applier.apply(plan)
        return ReconcileResult(rule=rule, plan=plan)
