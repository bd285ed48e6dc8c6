from typing import Iterable, Tuple

from .layout import LayoutRule, Output, Relation, Resolution, Rotation


class DisplayConfig:
    XRANDR_BINARY = "xrandr"

    # Seconds; a hung X server must not block session startup forever
    QUERY_TIMEOUT_SECONDS = 10
    APPLY_TIMEOUT_SECONDS = 30

    DEFAULT_RESOLUTION = Resolution(2560, 1440)

    # Older intel/modesetting drivers name connectors DP1, DP2
    LEGACY_RULE = LayoutRule(
        trigger_output="DP2",
        primary_output="DP1",
        secondary_output="DP2",
        resolution=DEFAULT_RESOLUTION,
        rotation=Rotation.NORMAL,
        relative_position=Relation.RIGHT_OF,
    )

    # Current kernels name them DP-1, DP-2
    HYPHENATED_RULE = LayoutRule(
        trigger_output="DP-2",
        primary_output="DP-1",
        secondary_output="DP-2",
        resolution=DEFAULT_RESOLUTION,
        rotation=Rotation.NORMAL,
        relative_position=Relation.RIGHT_OF,
    )

    RULES: Tuple[LayoutRule, ...] = (LEGACY_RULE, HYPHENATED_RULE)


def select_rule(outputs: Iterable[Output], rules: Tuple[LayoutRule, ...] = DisplayConfig.RULES) -> LayoutRule:
    """Pick the rule matching the connector naming the server reports.

    A rule whose trigger is connected wins, then one whose trigger is merely
    reported, then one sharing any output name with the query result. With no
    overlap the first rule is returned and its trigger is simply absent.
    """
    if not rules:
        raise ValueError("No layout rules configured")

    outputs = list(outputs)
    connected = {output.name for output in outputs if output.connected}
    names = {output.name for output in outputs}
    for rule in rules:
        if rule.trigger_output in connected:
            return rule
    for rule in rules:
        if rule.trigger_output in names:
            return rule
    for rule in rules:
        if names.intersection(rule.output_names):
            return rule
    return rules[0]
