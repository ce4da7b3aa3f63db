from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..catalog.models import BodyWeight, Intensity, Sweetness, WineType
from ..matching.models import PreferenceVector


class ProfileDimensions(BaseModel):
    """0-100 display axes for the results chart. Not used for scoring."""

    model_config = ConfigDict(frozen=True)

    acidity: int = Field(..., ge=0, le=100)
    tannins: int = Field(..., ge=0, le=100)
    body: int = Field(..., ge=0, le=100)
    sweetness: int = Field(..., ge=0, le=100)
    intensity: int = Field(..., ge=0, le=100)


class ProfileCharacteristics(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    acidity: Intensity
    tannins: Intensity
    body_weight: BodyWeight = Field(..., alias="bodyWeight")
    sweetness: Sweetness
    flavor_notes: tuple[str, ...] = Field(..., alias="flavorNotes")


class QuizProfile(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    wine_type: WineType = Field(..., alias="wineType")
    characteristics: ProfileCharacteristics
    dimensions: ProfileDimensions


class QuizQuestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    question: str
    choices: tuple[str, ...]


class QuizPreferences(PreferenceVector):
    """Preference vector derived from a quiz profile, plus its display axes."""

    dimensions: ProfileDimensions | None = None


class QuizSubmitRequest(BaseModel):
    answers: list[int]


class QuizResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    profile: str
    profile_id: str = Field(..., alias="profileId")
    wine_type: WineType = Field(..., alias="wineType")
    characteristics: ProfileCharacteristics
    preferences: QuizPreferences
