"""Evaluation endpoint."""

from typing import Any

from fastapi import APIRouter, Body

from fra_dss.api.deps import RuleStoreDep
from fra_dss.engine.evaluator import DecisionRulesEngine
from fra_dss.schemas.evaluation import EvaluateResponse

router = APIRouter()


@router.post("/evaluate", response_model=EvaluateResponse)
async def evaluate(store: RuleStoreDep, record: dict[str, Any] = Body(...)):
    """
    Evaluate all active decision rules against a claim record.
    Returns per-rule results (ascending rule id) and bucketed recommendations.
    """
    results, recommendations = await DecisionRulesEngine(store).recommend(record)
    return EvaluateResponse(evaluation_results=results, recommendations=recommendations)
