"""SQLAlchemy-backed rule store."""

import logging
from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fra_dss.engine.validation import validate_rule_fields
from fra_dss.models import DecisionRule
from fra_dss.schemas.rules import Rule, RuleCreate, RuleUpdate
from fra_dss.storage.base import RuleStoreUnavailableError

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SqlRuleStore:
    """RuleStore over the decision_rules table. Commits are left to the session owner."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _fetch(self, stmt) -> list[Rule]:
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Rule store query failed: %s", exc)
            raise RuleStoreUnavailableError("Failed to fetch decision rules") from exc
        return [Rule.model_validate(row) for row in result.scalars().all()]

    async def get_active_rules(self) -> list[Rule]:
        return await self._fetch(
            select(DecisionRule)
            .where(DecisionRule.active.is_(True))
            .order_by(DecisionRule.priority.asc(), DecisionRule.id.asc())
        )

    async def get_all_rules(self) -> list[Rule]:
        return await self._fetch(
            select(DecisionRule).order_by(
                DecisionRule.priority.asc(),
                DecisionRule.created_at.desc(),
                DecisionRule.id.desc(),
            )
        )

    async def get_rule_by_id(self, rule_id: int) -> Rule | None:
        rules = await self._fetch(select(DecisionRule).where(DecisionRule.id == rule_id))
        return rules[0] if rules else None

    async def create_rule(self, rule_in: RuleCreate) -> Rule:
        """Validate and insert; id and timestamps are assigned here."""
        data = rule_in.model_dump()
        validate_rule_fields(data)
        now = _now()
        row = DecisionRule(**data, created_at=now, updated_at=now)
        try:
            self.db.add(row)
            await self.db.flush()
            await self.db.refresh(row)
        except SQLAlchemyError as exc:
            logger.error("Failed to create rule %r: %s", rule_in.name, exc)
            raise RuleStoreUnavailableError("Failed to create decision rule") from exc
        logger.info("Created decision rule %s (%s)", row.id, row.name)
        return Rule.model_validate(row)

    async def update_rule(self, rule_id: int, rule_in: RuleUpdate) -> Rule | None:
        """Partial update. Returns None when the rule does not exist."""
        changes = rule_in.model_dump(exclude_unset=True)
        try:
            row = await self.db.get(DecisionRule, rule_id)
        except SQLAlchemyError as exc:
            logger.error("Failed to load rule %s: %s", rule_id, exc)
            raise RuleStoreUnavailableError("Failed to fetch decision rule") from exc
        if row is None:
            return None
        if not changes:
            return Rule.model_validate(row)

        validate_rule_fields(changes)
        try:
            for key, value in changes.items():
                setattr(row, key, value)
            row.updated_at = _now()
            await self.db.flush()
            await self.db.refresh(row)
        except SQLAlchemyError as exc:
            logger.error("Failed to update rule %s: %s", rule_id, exc)
            raise RuleStoreUnavailableError("Failed to update decision rule") from exc
        logger.info("Updated decision rule %s: %s", rule_id, sorted(changes))
        return Rule.model_validate(row)

    async def delete_rule(self, rule_id: int) -> bool:
        try:
            result = await self.db.execute(delete(DecisionRule).where(DecisionRule.id == rule_id))
        except SQLAlchemyError as exc:
            logger.error("Failed to delete rule %s: %s", rule_id, exc)
            raise RuleStoreUnavailableError("Failed to delete decision rule") from exc
        return (result.rowcount or 0) > 0
