"""Goal weight projections for overlays and forms."""

from weight_tracker.domain.weights import DisplayStyle, Unit
from weight_tracker.services.conversions import (
    format_weight,
    pounds_to_stones,
    to_fixed,
)
from weight_tracker.services.series import display_value


def goal_value(goal_pounds: float | None, unit: Unit | str) -> float | None:
    """Return the goal in the same unit as chart points, or None if unset."""
    if goal_pounds is None:
        return None
    return display_value(goal_pounds, unit)


def goal_label(goal_pounds: float | None, unit: Unit | str) -> str | None:
    """Return the long formatted goal, or None if unset."""
    if goal_pounds is None:
        return None
    return format_weight(goal_pounds, unit, DisplayStyle.LONG)


def goal_form_defaults(goal_pounds: float | None) -> tuple[str, str]:
    """Return stones and pounds text to pre-fill a goal form."""
    if goal_pounds is None:
        return "", ""
    split = pounds_to_stones(goal_pounds)
    return str(split.stones), to_fixed(split.pounds, 1)


def goal_header_label(goal_pounds: float | None) -> str | None:
    """Return the short imperial goal shown in the page header."""
    if goal_pounds is None:
        return None
    return format_weight(goal_pounds, Unit.IMPERIAL, DisplayStyle.SHORT)
