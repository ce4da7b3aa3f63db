"""
Wine taste quiz.

Responsibilities:
- Hold the ten taste profiles, the fifteen questions and their scoring matrix.
- Validate submitted answers.
- Tally matrix awards and resolve the winning profile, breaking ties at random.
- Turn the winning profile into a preference vector for matching.
"""
from .classifier import (
    InvalidInput,
    build_quiz_result,
    classify_answers,
    tally_scores,
    validate_answers,
)
from .config import DEFAULT_QUIZ_CONFIG, QuizConfig
from .models import QuizPreferences, QuizProfile, QuizQuestion, QuizResult, QuizSubmitRequest

__all__ = [
    "DEFAULT_QUIZ_CONFIG",
    "InvalidInput",
    "QuizConfig",
    "QuizPreferences",
    "QuizProfile",
    "QuizQuestion",
    "QuizResult",
    "QuizSubmitRequest",
    "build_quiz_result",
    "classify_answers",
    "tally_scores",
    "validate_answers",
]
