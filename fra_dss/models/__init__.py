"""Database models."""

from fra_dss.models.decision_rule import DecisionRule

__all__ = ["DecisionRule"]
