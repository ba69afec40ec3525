"""Sample FRA decision rules."""

import logging

from fra_dss.schemas.rules import Rule, RuleCreate
from fra_dss.storage.base import RuleStore

logger = logging.getLogger(__name__)

SAMPLE_RULES = [
    RuleCreate(
        name="High Risk Area Alert",
        description="Alert when claim is in high-risk forest area",
        conditions={
            "all": [
                {"field": "forest_type", "operator": "equals", "value": "protected"},
                {"field": "area_hectares", "operator": "greater_than", "value": 5},
            ]
        },
        action="URGENT: Review claim in protected forest area - requires special approval",
        priority=10,
    ),
    RuleCreate(
        name="Community Claim Validation",
        description="Validate community claims have proper documentation",
        conditions={
            "all": [
                {"field": "claim_type", "operator": "equals", "value": "community"},
                {"field": "witnesses_count", "operator": "less_than", "value": 3},
            ]
        },
        action="Request additional witnesses for community claim validation",
        priority=20,
    ),
    RuleCreate(
        name="Area Size Check",
        description="Check if claimed area is within reasonable limits",
        conditions={"field": "area_hectares", "operator": "greater_than", "value": 10},
        action="Verify land survey and boundaries - area exceeds 10 hectares",
        priority=30,
    ),
    RuleCreate(
        name="Documentation Completeness",
        description="Check if all required documents are present",
        conditions={
            "all": [
                {"field": "has_land_survey", "operator": "equals", "value": False},
                {"field": "has_village_certificate", "operator": "equals", "value": False},
            ]
        },
        action="Request missing documentation: land survey and village certificate required",
        priority=40,
    ),
    RuleCreate(
        name="CFR Overlap Protected Area",
        description="Community forest resource claim overlapping a protected area",
        conditions={"any": [{"field": "overlap_PA", "operator": "equals", "value": True}]},
        action="Escalate to district level committee - CFR overlaps protected area",
        priority=20,
    ),
]


async def install_sample_rules(store: RuleStore) -> list[Rule]:
    """Create every sample rule whose name is not in the store yet."""
    existing = {rule.name for rule in await store.get_all_rules()}
    created: list[Rule] = []
    for sample in SAMPLE_RULES:
        if sample.name in existing:
            logger.info("Sample rule %r already exists, skipping", sample.name)
            continue
        created.append(await store.create_rule(sample))
    return created
