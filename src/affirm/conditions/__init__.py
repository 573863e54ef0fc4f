"""Condition evaluators: pure checks returning ``Pass`` or ``Fail``."""

from affirm.conditions.comparables import evaluate_is_between
from affirm.conditions.files import FileConditions

__all__ = ["FileConditions", "evaluate_is_between"]
