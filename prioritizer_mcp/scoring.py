"""Priority scoring for tasks."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from prioritizer_mcp.errors import ValidationError

if TYPE_CHECKING:
    from prioritizer_mcp.models.inputs import TaskSubmission

# Difficulty and time are inverted around this pivot so that quick, easy
# tasks score higher. Inputs are expected in roughly 1-20.
INVERSION_PIVOT = 21

IMPACT_WEIGHT = 1.2
URGENCY_WEIGHT = 1.2


def compute_score(difficulty: float, impact: float, time: float, urgency: float) -> float:
    """
    Calculate the priority score for a task. Higher score = higher priority.

    score = sqrt((21 - difficulty)^2 + impact^2 * 1.2 + (21 - time)^2 + urgency^2 * 1.2)

    Lower difficulty and lower time raise the score ("quick wins"); higher
    impact and urgency raise it, each weighted 1.2x inside the square. The
    terms are combined as a Euclidean norm rather than a weighted sum.

    Evaluated with math.hypot, so no squares are formed and large finite
    inputs do not overflow. No range checks are performed and NaN propagates.

    Args:
        difficulty: How hard the task is
        impact: How much finishing the task matters
        time: Effort required
        urgency: How soon it needs doing

    Returns:
        The priority score (inf if the score itself is beyond float range)
    """
    return math.hypot(
        INVERSION_PIVOT - difficulty,
        impact * math.sqrt(IMPACT_WEIGHT),
        INVERSION_PIVOT - time,
        urgency * math.sqrt(URGENCY_WEIGHT),
    )


def score_submission(submission: TaskSubmission) -> float:
    """
    Score a decoded task submission.

    Raises:
        ValidationError: If the values are too large for the score to be represented
    """
    score = compute_score(
        submission.difficulty,
        submission.impact,
        submission.time,
        submission.urgency,
    )
    if not math.isfinite(score):
        raise ValidationError("Task values are too large to score")
    return score
