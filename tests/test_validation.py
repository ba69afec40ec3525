"""Unit tests for rule validation at the write boundary."""

import pytest

from fra_dss.engine.validation import (
    InvalidRuleError,
    validate_conditions,
    validate_rule_fields,
)


@pytest.mark.parametrize(
    "conditions",
    [
        {"field": "area_hectares", "operator": "greater_than", "value": 10},
        {"all": [{"field": "claim_type", "operator": "equals", "value": "community"}]},
        {"any": [{"field": "overlap_PA", "operator": "equals", "value": True}]},
        {"field": "claim_type", "operator": "in", "value": ["community", "individual"]},
        {"field": "village", "operator": "not_contains", "value": "test"},
    ],
)
def test_valid_shapes(conditions):
    """The three supported shapes pass."""
    validate_conditions(conditions)


@pytest.mark.parametrize(
    "conditions, message",
    [
        ({}, "non-empty object"),
        ([], "non-empty object"),
        ({"all": []}, "non-empty list"),
        ({"any": "x"}, "non-empty list"),
        ({"all": [], "any": []}, "both 'all' and 'any'"),
        ({"all": [{"field": "a", "operator": "equals", "value": 1}], "note": "x"}, "unknown keys"),
        ({"field": "a", "operator": "equals"}, "missing keys"),
        ({"field": "a", "operator": "equals", "value": 1, "op": "eq"}, "unknown keys"),
        ({"field": "", "operator": "equals", "value": 1}, "'field'"),
        ({"field": "area_ha", "operator": "lte", "value": 4}, "invalid operator"),
        ({"field": "a", "operator": "eq", "value": 1}, "invalid operator"),
        ({"field": "a", "operator": "in", "value": "x"}, "list of scalar"),
        ({"field": "a", "operator": "greater_than", "value": "5"}, "numeric"),
        ({"field": "a", "operator": "less_than", "value": True}, "numeric"),
        ({"field": "a", "operator": "equals", "value": None}, "scalar"),
        ({"any": [{"all": [{"field": "a", "operator": "equals", "value": 1}]}]}, "nested"),
        ({"and": [{"field": "a", "operator": "equals", "value": 1}]}, "unknown keys"),
    ],
)
def test_invalid_shapes(conditions, message):
    """Malformed trees are rejected with a descriptive error."""
    with pytest.raises(InvalidRuleError, match=message):
        validate_conditions(conditions)


def test_error_is_value_error():
    """Callers can catch it as a ValueError."""
    assert issubclass(InvalidRuleError, ValueError)


def test_rule_fields():
    """Only supplied fields are checked."""
    validate_rule_fields({})
    validate_rule_fields({"description": None, "priority": 5, "active": False})
    with pytest.raises(InvalidRuleError, match="action"):
        validate_rule_fields({"action": "   "})
    with pytest.raises(InvalidRuleError, match="name"):
        validate_rule_fields({"name": None})
    with pytest.raises(InvalidRuleError, match="priority"):
        validate_rule_fields({"priority": None})
    with pytest.raises(InvalidRuleError, match="active"):
        validate_rule_fields({"active": None})
