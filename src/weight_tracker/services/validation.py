"""Validation of raw weight and date input before it reaches the server."""

import math
from datetime import date

from weight_tracker.domain.errors import WeightInputError
from weight_tracker.services.conversions import POUNDS_PER_STONE, stones_to_pounds

STONES_ERROR = "Stones must be a positive number"
POUNDS_ERROR = "Pounds must be between 0 and 13.99"
DATE_REQUIRED_ERROR = "Date is required"
DATE_FORMAT_ERROR = "Date must be in YYYY-MM-DD format"
DATE_FUTURE_ERROR = "Date cannot be in the future"


def parse_number(raw: object) -> float | None:
    """Parse a form value to a finite float, or None if it is not a number."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int | float):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(value):
        return None
    return value


def validate_weight_input(stones_raw: object, pounds_raw: object) -> float:
    """Validate stones and pounds input and return canonical pounds.

    Stones are checked before pounds, so only the first failing field is
    reported.
    """
    stones = parse_number(stones_raw)
    if stones is None or stones < 0:
        raise WeightInputError("stones", STONES_ERROR)

    pounds = parse_number(pounds_raw)
    if pounds is None or pounds < 0 or pounds >= POUNDS_PER_STONE:
        raise WeightInputError("pounds", POUNDS_ERROR)

    total = stones_to_pounds(stones, pounds)
    if not math.isfinite(total):
        raise WeightInputError("stones", STONES_ERROR)
    return total


def validate_entry_date(raw: str | None, today: date) -> str:
    """Validate an ISO entry date that must not be after today."""
    text = (raw or "").strip()
    if not text:
        raise WeightInputError("date", DATE_REQUIRED_ERROR)
    try:
        parsed = date.fromisoformat(text)
    except ValueError:
        raise WeightInputError("date", DATE_FORMAT_ERROR) from None
    if parsed.isoformat() != text:
        raise WeightInputError("date", DATE_FORMAT_ERROR)
    if parsed > today:
        raise WeightInputError("date", DATE_FUTURE_ERROR)
    return text
