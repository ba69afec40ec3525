"""Condition evaluator - one field/operator/value comparison against a record."""

import math
from typing import Any

OPERATORS = (
    "equals",
    "not_equals",
    "greater_than",
    "less_than",
    "contains",
    "not_contains",
    "in",
    "not_in",
)

INFINITY_SPELLINGS = ("Infinity", "+Infinity", "-Infinity")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def strict_equals(left: Any, right: Any) -> bool:
    """Type-sensitive equality: "5" != 5 and True != 1."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    if _is_number(left) and _is_number(right):
        return left == right
    if type(left) is not type(right):
        return False
    return left == right


def to_number(value: Any) -> float:
    """Coerce to float; NaN when the value has no numeric reading."""
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if _is_number(value):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if text in INFINITY_SPELLINGS:
            return -math.inf if text.startswith("-") else math.inf
        # float() also reads "1_000", "inf" and "nan"; only plain decimals count here
        lowered = text.lower()
        if "_" in text or "inf" in lowered or "nan" in lowered:
            return math.nan
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def to_text(value: Any) -> str:
    """Render a value the way it appears in traces and substring tests."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if _is_number(value) and math.isinf(to_number(value)):
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, (list, tuple)):
        return ",".join(to_text(v) for v in value)
    return str(value)


def _member(value: Any, candidates: list) -> bool:
    return any(strict_equals(value, c) for c in candidates)


def evaluate_condition(field: str, operator: str, value: Any, record: dict) -> bool:
    """
    Evaluate one condition against the record.

    Missing fields and unknown operators never match; nothing here raises for
    bad data.
    """
    actual = record.get(field)
    if actual is None:
        return False

    if operator == "equals":
        return strict_equals(actual, value)
    if operator == "not_equals":
        return not strict_equals(actual, value)
    if operator == "greater_than":
        return to_number(actual) > to_number(value)
    if operator == "less_than":
        return to_number(actual) < to_number(value)
    if operator == "contains":
        return to_text(value).lower() in to_text(actual).lower()
    if operator == "not_contains":
        return to_text(value).lower() not in to_text(actual).lower()
    if operator == "in":
        return isinstance(value, (list, tuple)) and _member(actual, list(value))
    if operator == "not_in":
        return isinstance(value, (list, tuple)) and not _member(actual, list(value))
    return False


def describe_condition(field: str, operator: str, value: Any) -> str:
    """Trace entry, e.g. 'area_hectares greater_than 5'."""
    return f"{field} {operator} {to_text(value)}"
