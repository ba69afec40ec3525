"""Rule store contract used by the engine and the API."""

from typing import Protocol

from fra_dss.schemas.rules import Rule, RuleCreate, RuleUpdate


class RuleStoreUnavailableError(RuntimeError):
    """The backing store could not be reached or failed mid-query."""


class RuleStore(Protocol):
    """Persistence for decision rules. Implementations validate before writing."""

    async def get_active_rules(self) -> list[Rule]:
        """Rules with active=True. Callers must not rely on the order."""
        ...

    async def get_all_rules(self) -> list[Rule]:
        ...

    async def get_rule_by_id(self, rule_id: int) -> Rule | None:
        ...

    async def create_rule(self, rule_in: RuleCreate) -> Rule:
        ...

    async def update_rule(self, rule_id: int, rule_in: RuleUpdate) -> Rule | None:
        ...

    async def delete_rule(self, rule_id: int) -> bool:
        ...
