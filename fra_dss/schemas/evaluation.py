"""Evaluation result and recommendation schemas."""

from pydantic import BaseModel, Field


class EvaluationResult(BaseModel):
    """Outcome of one rule against one record."""

    rule_id: int
    rule_name: str
    matched: bool
    action: str
    conditions_met: list[str] = Field(default_factory=list)
    conditions_failed: list[str] = Field(default_factory=list)
    evaluation_duration: float = 0.0  # milliseconds


class RecommendationBundle(BaseModel):
    """Actions bucketed by urgency plus warnings for unmatched rules."""

    actions: list[str] = Field(default_factory=list)
    high_priority_actions: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class EvaluateResponse(BaseModel):
    """POST /api/decision-rules/evaluate response."""

    evaluation_results: list[EvaluationResult] = Field(default_factory=list)
    recommendations: RecommendationBundle
