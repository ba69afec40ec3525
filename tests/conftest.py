"""Shared fixtures."""

import pytest

from fra_dss.schemas.rules import Rule


@pytest.fixture
def high_risk_rule() -> Rule:
    return Rule(
        id=1,
        name="High Risk Area Alert",
        conditions={
            "all": [
                {"field": "forest_type", "operator": "equals", "value": "protected"},
                {"field": "area_hectares", "operator": "greater_than", "value": 5},
            ]
        },
        action="URGENT: review",
        priority=10,
    )
