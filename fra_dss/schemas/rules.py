"""Decision rule schemas."""

import json
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RuleCreate(BaseModel):
    """POST /api/decision-rules request."""

    name: str
    description: str | None = None
    conditions: dict[str, Any]
    action: str
    active: bool = True
    priority: int = 100


class RuleUpdate(BaseModel):
    """PUT /api/decision-rules/{id} request - only supplied fields change."""

    name: str | None = None
    description: str | None = None
    conditions: dict[str, Any] | None = None
    action: str | None = None
    active: bool | None = None
    priority: int | None = None


class Rule(BaseModel):
    """A persisted decision rule, as handed to the engine."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    # Any: rows edited outside the API may hold lists, scalars or bad text
    conditions: Any = Field(default_factory=dict)
    action: str
    active: bool = True
    priority: int = 100
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("conditions", mode="before")
    @classmethod
    def decode_conditions(cls, v: Any) -> Any:
        """Legacy rows store conditions as JSON text; undecodable text is kept as-is."""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except ValueError:
                return v
        return v
