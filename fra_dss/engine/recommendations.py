"""Recommendation synthesis from evaluation results."""

from collections.abc import Iterable

from fra_dss.schemas.evaluation import EvaluationResult, RecommendationBundle

URGENT_KEYWORDS = ("urgent", "critical")


def is_urgent(action: str) -> bool:
    lowered = action.lower()
    return any(keyword in lowered for keyword in URGENT_KEYWORDS)


def synthesize_recommendations(results: Iterable[EvaluationResult]) -> RecommendationBundle:
    """
    Matched rules become actions (urgent ones go to high_priority_actions);
    unmatched rules with failed conditions become warnings. Input order is kept.
    """
    bundle = RecommendationBundle()
    for result in results:
        if result.matched:
            if is_urgent(result.action):
                bundle.high_priority_actions.append(result.action)
            else:
                bundle.actions.append(result.action)
        elif result.conditions_failed:
            bundle.warnings.append(
                f'Rule "{result.rule_name}" conditions not met: '
                + ", ".join(result.conditions_failed)
            )
    return bundle
