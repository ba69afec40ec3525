"""Condition trees - parsing stored JSON into a tagged variant and evaluating it with traces."""

from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

from fra_dss.engine.conditions import describe_condition, evaluate_condition

INVALID_CONDITION = "Invalid condition format"


class AtomicCondition(BaseModel):
    """Single comparison: {field, operator, value}."""

    model_config = ConfigDict(frozen=True)

    field: str
    operator: str
    value: Any = None


class InvalidCondition(BaseModel):
    """Placeholder for a stored shape that is none of the recognized ones."""

    model_config = ConfigDict(frozen=True)


class AllConditions(BaseModel):
    """Conjunction: {"all": [...]}."""

    model_config = ConfigDict(frozen=True)

    conditions: list[Union[AtomicCondition, InvalidCondition]] = Field(default_factory=list)


class AnyConditions(BaseModel):
    """Disjunction: {"any": [...]}."""

    model_config = ConfigDict(frozen=True)

    conditions: list[Union[AtomicCondition, InvalidCondition]] = Field(default_factory=list)


ConditionTree = Union[AtomicCondition, AllConditions, AnyConditions, InvalidCondition]


class TreeEvaluation(BaseModel):
    """Verdict plus ordered traces for one condition tree."""

    matched: bool
    met: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)


def _parse_atomic(raw: Any) -> AtomicCondition | InvalidCondition:
    if not isinstance(raw, Mapping):
        return InvalidCondition()
    if "all" in raw or "any" in raw or "value" not in raw:
        return InvalidCondition()
    field = raw.get("field")
    operator = raw.get("operator")
    if not isinstance(field, str) or not field:
        return InvalidCondition()
    if not isinstance(operator, str) or not operator:
        return InvalidCondition()
    return AtomicCondition(field=field, operator=operator, value=raw["value"])


def parse_conditions(raw: Any) -> ConditionTree:
    """
    Map a stored conditions object onto the tagged variant.

    Unrecognized keys are ignored. Shapes that cannot be read come back as
    InvalidCondition rather than raising.
    """
    if not isinstance(raw, Mapping):
        return InvalidCondition()
    has_all = "all" in raw
    has_any = "any" in raw
    if has_all and has_any:
        return InvalidCondition()
    if has_all or has_any:
        children = raw["all"] if has_all else raw["any"]
        if not isinstance(children, list):
            return InvalidCondition()
        parsed = [_parse_atomic(child) for child in children]
        if has_all:
            return AllConditions(conditions=parsed)
        return AnyConditions(conditions=parsed)
    return _parse_atomic(raw)


def _check(cond: AtomicCondition | InvalidCondition, record: Mapping, met: list, failed: list) -> bool:
    if isinstance(cond, InvalidCondition):
        failed.append(INVALID_CONDITION)
        return False
    ok = evaluate_condition(cond.field, cond.operator, cond.value, record)
    (met if ok else failed).append(describe_condition(cond.field, cond.operator, cond.value))
    return ok


def evaluate_tree(conditions: ConditionTree | Mapping, record: Mapping) -> TreeEvaluation:
    """Evaluate a condition tree, recording every atomic condition in met or failed."""
    tree = conditions if isinstance(conditions, BaseModel) else parse_conditions(conditions)
    met: list[str] = []
    failed: list[str] = []

    if isinstance(tree, AllConditions):
        # Evaluate every child so the trace is complete
        outcomes = [_check(c, record, met, failed) for c in tree.conditions]
        matched = all(outcomes)
    elif isinstance(tree, AnyConditions):
        outcomes = [_check(c, record, met, failed) for c in tree.conditions]
        matched = any(outcomes)
    elif isinstance(tree, (AtomicCondition, InvalidCondition)):
        matched = _check(tree, record, met, failed)
    else:
        raise TypeError(f"Unsupported condition tree: {type(tree).__name__}")

    return TreeEvaluation(matched=matched, met=met, failed=failed)


def count_conditions(tree: ConditionTree) -> int:
    """Number of atomic slots in a tree (including unreadable ones)."""
    if isinstance(tree, (AllConditions, AnyConditions)):
        return len(tree.conditions)
    return 1
