"""Rule evaluator - runs every active rule against a record with explainability."""

import logging
import time
from collections.abc import Iterable, Mapping
from typing import Any

from fra_dss.engine.recommendations import synthesize_recommendations
from fra_dss.engine.tree import evaluate_tree
from fra_dss.schemas.evaluation import EvaluationResult, RecommendationBundle
from fra_dss.schemas.rules import Rule
from fra_dss.storage.base import RuleStore

logger = logging.getLogger(__name__)


def _evaluate_one(rule: Rule, record: Mapping[str, Any]) -> EvaluationResult:
    started = time.perf_counter()
    try:
        outcome = evaluate_tree(rule.conditions, record)
        matched, met, failed = outcome.matched, outcome.met, outcome.failed
    except Exception as exc:
        logger.exception("Error evaluating rule %s (%s)", rule.id, rule.name)
        matched, met, failed = False, [], [f"Evaluation error: {exc}"]
    elapsed_ms = (time.perf_counter() - started) * 1000

    logger.debug("Rule %s (%s) matched=%s", rule.id, rule.name, matched)
    return EvaluationResult(
        rule_id=rule.id,
        rule_name=rule.name,
        matched=matched,
        action=rule.action,
        conditions_met=met,
        conditions_failed=failed,
        evaluation_duration=elapsed_ms,
    )


def evaluate_rules(record: Mapping[str, Any], rules: Iterable[Rule]) -> list[EvaluationResult]:
    """
    Evaluate active rules against one record.

    Every rule gets a result; a rule that blows up is reported as unmatched
    instead of aborting the batch. Results are ordered by rule id ascending,
    whatever order the rules arrive in.
    """
    results = [_evaluate_one(rule, record) for rule in rules if rule.active]
    results.sort(key=lambda r: r.rule_id)
    logger.info(
        "Evaluated %d rules: %d matched",
        len(results),
        sum(1 for r in results if r.matched),
    )
    return results


class DecisionRulesEngine:
    """Evaluates the store's active rules; the store is the only I/O."""

    def __init__(self, store: RuleStore):
        self.store = store

    async def evaluate_all(self, record: Mapping[str, Any]) -> list[EvaluationResult]:
        rules = await self.store.get_active_rules()
        return evaluate_rules(record, rules)

    async def recommend(
        self, record: Mapping[str, Any]
    ) -> tuple[list[EvaluationResult], RecommendationBundle]:
        """Evaluate, then bucket the outcome into actions and warnings."""
        results = await self.evaluate_all(record)
        return results, synthesize_recommendations(results)
