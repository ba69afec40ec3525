"""In-process rule store for batch jobs and tests."""

from datetime import datetime, timezone

from fra_dss.engine.validation import validate_rule_fields
from fra_dss.schemas.rules import Rule, RuleCreate, RuleUpdate


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryRuleStore:
    """Dict-backed RuleStore. Hands out copies so callers cannot mutate stored rules."""

    def __init__(self, rules: list[Rule] | None = None):
        self._rules: dict[int, Rule] = {}
        self._next_id = 1
        for rule in rules or []:
            self._rules[rule.id] = rule.model_copy(deep=True)
            self._next_id = max(self._next_id, rule.id + 1)

    async def get_active_rules(self) -> list[Rule]:
        return [r.model_copy(deep=True) for r in self._rules.values() if r.active]

    async def get_all_rules(self) -> list[Rule]:
        rules = sorted(
            self._rules.values(),
            key=lambda r: (r.priority, -(r.created_at.timestamp() if r.created_at else 0), -r.id),
        )
        return [r.model_copy(deep=True) for r in rules]

    async def get_rule_by_id(self, rule_id: int) -> Rule | None:
        rule = self._rules.get(rule_id)
        return rule.model_copy(deep=True) if rule else None

    async def create_rule(self, rule_in: RuleCreate) -> Rule:
        data = rule_in.model_dump()
        validate_rule_fields(data)
        now = _now()
        rule = Rule(id=self._next_id, created_at=now, updated_at=now, **data)
        self._rules[rule.id] = rule
        self._next_id += 1
        return rule.model_copy(deep=True)

    async def update_rule(self, rule_id: int, rule_in: RuleUpdate) -> Rule | None:
        existing = self._rules.get(rule_id)
        if existing is None:
            return None
        changes = rule_in.model_dump(exclude_unset=True)
        if not changes:
            return existing.model_copy(deep=True)
        validate_rule_fields(changes)
        updated = existing.model_copy(update={**changes, "updated_at": _now()}, deep=True)
        self._rules[rule_id] = updated
        return updated.model_copy(deep=True)

    async def delete_rule(self, rule_id: int) -> bool:
        return self._rules.pop(rule_id, None) is not None
