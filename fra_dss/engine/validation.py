"""Write-boundary validation for decision rules."""

from typing import Any

from fra_dss.engine.conditions import OPERATORS

ATOMIC_KEYS = {"field", "operator", "value"}
GROUP_KEYS = {"all", "any"}
NUMERIC_OPERATORS = {"greater_than", "less_than"}
LIST_OPERATORS = {"in", "not_in"}


class InvalidRuleError(ValueError):
    """Rule payload rejected before it reaches the store."""


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def _validate_atomic(cond: Any, where: str) -> None:
    if not isinstance(cond, dict):
        raise InvalidRuleError(f"{where}: condition must be an object")
    keys = set(cond)
    if keys & GROUP_KEYS:
        raise InvalidRuleError(f"{where}: nested 'all'/'any' groups are not supported")
    unknown = keys - ATOMIC_KEYS
    if unknown:
        raise InvalidRuleError(f"{where}: unknown keys {sorted(unknown)}")
    missing = ATOMIC_KEYS - keys
    if missing:
        raise InvalidRuleError(f"{where}: missing keys {sorted(missing)}")

    field, operator, value = cond["field"], cond["operator"], cond["value"]
    if not isinstance(field, str) or not field.strip():
        raise InvalidRuleError(f"{where}: 'field' must be a non-empty string")
    if operator not in OPERATORS:
        raise InvalidRuleError(
            f"{where}: invalid operator: {operator!r}. Allowed: {', '.join(OPERATORS)}"
        )
    if operator in LIST_OPERATORS:
        if not isinstance(value, list) or not all(_is_scalar(v) for v in value):
            raise InvalidRuleError(f"{where}: '{operator}' requires a list of scalar values")
    elif operator in NUMERIC_OPERATORS:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidRuleError(f"{where}: '{operator}' requires a numeric value")
    elif not _is_scalar(value):
        raise InvalidRuleError(f"{where}: '{operator}' requires a scalar value")


def validate_conditions(conditions: Any) -> None:
    """
    Reject anything that is not an atomic condition, {"all": [...]} or {"any": [...]}.

    Groups must be non-empty and may only hold atomic conditions.
    """
    if not isinstance(conditions, dict) or not conditions:
        raise InvalidRuleError("conditions must be a non-empty object")

    groups = set(conditions) & GROUP_KEYS
    if not groups:
        _validate_atomic(conditions, "conditions")
        return
    if len(groups) > 1:
        raise InvalidRuleError("conditions cannot contain both 'all' and 'any'")

    key = groups.pop()
    extra = set(conditions) - {key}
    if extra:
        raise InvalidRuleError(f"conditions: unknown keys {sorted(extra)} next to '{key}'")
    children = conditions[key]
    if not isinstance(children, list) or not children:
        raise InvalidRuleError(f"'{key}' requires a non-empty list of conditions")
    for i, child in enumerate(children):
        _validate_atomic(child, f"{key}[{i}]")


def validate_action(action: Any) -> None:
    if not isinstance(action, str) or not action.strip():
        raise InvalidRuleError("action must be a non-empty string")


def validate_rule_fields(fields: dict) -> None:
    """Validate the fields a create or update supplies."""
    if "conditions" in fields:
        validate_conditions(fields["conditions"])
    if "action" in fields:
        validate_action(fields["action"])
    if "name" in fields and (not isinstance(fields["name"], str) or not fields["name"].strip()):
        raise InvalidRuleError("name must be a non-empty string")
    if "active" in fields and not isinstance(fields["active"], bool):
        raise InvalidRuleError("active must be a boolean")
    if "priority" in fields:
        priority = fields["priority"]
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise InvalidRuleError("priority must be an integer")
