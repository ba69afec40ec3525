"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fra_dss.database import get_db
from fra_dss.storage.base import RuleStore
from fra_dss.storage.repositories import SqlRuleStore


async def get_rule_store(db: Annotated[AsyncSession, Depends(get_db)]) -> RuleStore:
    """Rule store bound to the request's session."""
    return SqlRuleStore(db)


# Type alias for dependency injection
RuleStoreDep = Annotated[RuleStore, Depends(get_rule_store)]
