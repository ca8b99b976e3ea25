"""
Disqualification module.

Evaluates a domain's ordered rule list against one forecast hour. The first
matching hard rule forces the hour's score to 0 and stops evaluation; soft
rules accumulate a fixed penalty.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..models import DisqualificationRule, HourlyObservation, ScoringContext


@dataclass(frozen=True)
class DisqualificationOutcome:
    """Rules matched for one hour."""

    hard_rule: Optional[DisqualificationRule]
    soft_rules: Tuple[DisqualificationRule, ...]

    @property
    def disqualified(self) -> bool:
        return self.hard_rule is not None

    @property
    def penalty(self) -> float:
        """Total soft penalty (0 when disqualified, the score is already 0)."""
        if self.disqualified:
            return 0.0
        return sum(rule.penalty for rule in self.soft_rules)

    @property
    def reasons(self) -> Tuple[str, ...]:
        """Matched rule codes in rule order."""
        codes = tuple(rule.name for rule in self.soft_rules)
        if self.hard_rule is not None:
            codes += (self.hard_rule.name,)
        return codes


class DisqualificationEvaluator:
    """Apply hard and soft disqualification rules to forecast hours."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize disqualification evaluator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def evaluate(
        self,
        observation: HourlyObservation,
        context: ScoringContext,
        rules: Sequence[DisqualificationRule]
    ) -> DisqualificationOutcome:
        """
        Evaluate rules in order against one hour.

        Args:
            observation: Forecast hour
            context: Scoring context for the hour
            rules: Ordered rule list

        Returns:
            DisqualificationOutcome with the first hard match (if any) and
            the soft matches seen before it
        """
        soft_matches = []

        for rule in rules:
            if not rule.predicate(observation, context):
                continue

            if rule.is_hard:
                self.logger.debug(
                    f"{context.local_time.isoformat()}: disqualified by {rule.name} ({rule.reason})"
                )
                return DisqualificationOutcome(hard_rule=rule, soft_rules=tuple(soft_matches))

            self.logger.debug(
                f"{context.local_time.isoformat()}: soft rule {rule.name} (-{rule.penalty:g})"
            )
            soft_matches.append(rule)

        return DisqualificationOutcome(hard_rule=None, soft_rules=tuple(soft_matches))
