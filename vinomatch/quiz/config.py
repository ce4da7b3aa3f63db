from __future__ import annotations

from dataclasses import dataclass

from .models import QuizProfile, QuizQuestion
from .profiles import PROFILES
from .questions import QUESTIONS, SCORING_MATRIX, Award

_VALID_POINTS = (1, 2, 3)


@dataclass(frozen=True)
class QuizConfig:
    profiles: tuple[QuizProfile, ...] = PROFILES
    questions: tuple[QuizQuestion, ...] = QUESTIONS
    matrix: tuple[tuple[tuple[Award, ...], ...], ...] = SCORING_MATRIX
    default_price_range: tuple[float, float] = (20.0, 100.0)

    def __post_init__(self) -> None:
        known = {p.id for p in self.profiles}
        if len(known) != len(self.profiles):
            raise ValueError("quiz profile ids must be unique")
        if len(self.matrix) != len(self.questions):
            raise ValueError(
                f"scoring matrix has {len(self.matrix)} rows for {len(self.questions)} questions"
            )
        for question, row in zip(self.questions, self.matrix):
            if len(row) != len(question.choices):
                raise ValueError(
                    f"question {question.id} has {len(question.choices)} choices "
                    f"but {len(row)} scoring cells"
                )
            for awards in row:
                for award in awards:
                    if award.profile_id not in known:
                        raise ValueError(f"unknown profile {award.profile_id!r} in matrix")
                    if award.points not in _VALID_POINTS:
                        raise ValueError(f"invalid award of {award.points} points")

    def profile(self, profile_id: str) -> QuizProfile:
        for p in self.profiles:
            if p.id == profile_id:
                return p
        raise KeyError(profile_id)


DEFAULT_QUIZ_CONFIG = QuizConfig()
