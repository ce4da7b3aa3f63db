from __future__ import annotations

import logging
import random
from typing import Any, Sequence

from ..matching.models import PriceRange
from .config import DEFAULT_QUIZ_CONFIG, QuizConfig
from .models import QuizPreferences, QuizProfile, QuizResult

logger = logging.getLogger(__name__)


class InvalidInput(ValueError):
    """Quiz answers are the wrong length or pick a choice that does not exist."""


def validate_answers(answers: Sequence[Any], config: QuizConfig = DEFAULT_QUIZ_CONFIG) -> None:
    expected = len(config.questions)
    if len(answers) != expected:
        raise InvalidInput(f"Expected {expected} answers, got {len(answers)}")

    for question, answer in zip(config.questions, answers):
        if isinstance(answer, bool) or not isinstance(answer, int):
            raise InvalidInput(f"Answer to question {question.id} must be an integer")
        if not 0 <= answer < len(question.choices):
            raise InvalidInput(
                f"Answer to question {question.id} must be between 0 and "
                f"{len(question.choices) - 1}, got {answer}"
            )


def tally_scores(answers: Sequence[int], config: QuizConfig = DEFAULT_QUIZ_CONFIG) -> dict[str, int]:
    """Sum matrix awards per profile. Keys follow profile table order."""
    totals = {p.id: 0 for p in config.profiles}
    for row, answer in zip(config.matrix, answers):
        for award in row[answer]:
            totals[award.profile_id] += award.points
    return totals


def classify_answers(
    answers: Sequence[int],
    config: QuizConfig = DEFAULT_QUIZ_CONFIG,
    rng: random.Random | None = None,
) -> QuizProfile:
    """
    Resolve quiz answers to a taste profile.

    The highest tally wins. Profiles tied at the top are picked between
    uniformly at random via ``rng`` (the module-level generator when not
    given), so an all-zero tally can land on any profile.
    """
    validate_answers(answers, config)
    totals = tally_scores(answers, config)

    best = max(totals.values())
    tied = [pid for pid, total in totals.items() if total == best]
    winner = (rng or random).choice(tied)

    logger.debug("Quiz tallies: %s", totals)
    if len(tied) > 1:
        logger.info("Broke a %d-way tie at %d points: %s", len(tied), best, winner)

    return config.profile(winner)


def build_quiz_result(profile: QuizProfile, config: QuizConfig = DEFAULT_QUIZ_CONFIG) -> QuizResult:
    low, high = config.default_price_range
    traits = profile.characteristics
    preferences = QuizPreferences(
        wine_type=profile.wine_type.value,
        acidity=traits.acidity,
        tannins=traits.tannins,
        body_weight=traits.body_weight,
        sweetness=traits.sweetness,
        flavor_notes=list(traits.flavor_notes),
        price_range=PriceRange(min=low, max=high),
        dimensions=profile.dimensions,
    )
    return QuizResult(
        profile=profile.name,
        profile_id=profile.id,
        wine_type=profile.wine_type,
        characteristics=traits,
        preferences=preferences,
    )
