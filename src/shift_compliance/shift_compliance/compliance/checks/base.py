from __future__ import annotations

import math
from abc import ABC, abstractmethod

from ..model import ComplianceRule, ComplianceViolation, EvaluationContext


def round_hours(value: float) -> float:
    """One decimal, half-up."""
    return math.floor(value * 10 + 0.5) / 10


class ComplianceCheck(ABC):
    """Strategy Pattern: one labor-law rule evaluated against aggregated hours."""

    default_threshold_hours: float

    @abstractmethod
    def evaluate(self, context: EvaluationContext, rule: ComplianceRule) -> list[ComplianceViolation]:
        raise NotImplementedError
