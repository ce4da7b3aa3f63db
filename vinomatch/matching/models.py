from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..catalog.models import BodyWeight, Intensity, Sweetness, WineRecord


class WineTypePreference(str, Enum):
    any = "any"
    red = "red"
    white = "white"
    rose = "rosé"
    sparkling = "sparkling"
    dessert = "dessert"


class PriceRange(BaseModel):
    min: float
    max: float


def _known_or_none(enum_cls: type[Enum], value: Any) -> Any:
    if value is None or isinstance(value, enum_cls):
        return value
    if value in [member.value for member in enum_cls]:
        return value
    return None


class PreferenceVector(BaseModel):
    """
    A diner's desired sensory profile.

    Every dimension is optional. Values outside a dimension's vocabulary are
    treated as "not specified" rather than rejected, so a sloppy client still
    gets a (less informed) ranking.
    """

    model_config = ConfigDict(populate_by_name=True)

    wine_type: WineTypePreference = Field(default=WineTypePreference.any, alias="wineType")
    acidity: Intensity | None = None
    tannins: Intensity | None = None
    body_weight: BodyWeight | None = Field(default=None, alias="bodyWeight")
    sweetness: Sweetness | None = None
    flavor_notes: list[str] = Field(default_factory=list, alias="flavorNotes")
    price_range: PriceRange | None = Field(default=None, alias="priceRange")

    @field_validator("wine_type", mode="before")
    @classmethod
    def _unknown_type_means_any(cls, value: Any) -> Any:
        return _known_or_none(WineTypePreference, value) or WineTypePreference.any

    @field_validator("acidity", "tannins", mode="before")
    @classmethod
    def _drop_unknown_intensity(cls, value: Any) -> Any:
        return _known_or_none(Intensity, value)

    @field_validator("body_weight", mode="before")
    @classmethod
    def _drop_unknown_body(cls, value: Any) -> Any:
        return _known_or_none(BodyWeight, value)

    @field_validator("sweetness", mode="before")
    @classmethod
    def _drop_unknown_sweetness(cls, value: Any) -> Any:
        return _known_or_none(Sweetness, value)

    @field_validator("flavor_notes", mode="before")
    @classmethod
    def _only_string_notes(cls, value: Any) -> Any:
        if not isinstance(value, (list, tuple)):
            return []
        return [v for v in value if isinstance(v, str)]

    @field_validator("price_range", mode="before")
    @classmethod
    def _drop_bad_range(cls, value: Any) -> Any:
        if isinstance(value, PriceRange):
            return value if value.min <= value.max else None
        if not isinstance(value, dict):
            return None
        try:
            low, high = float(value["min"]), float(value["max"])
        except (KeyError, TypeError, ValueError):
            return None
        return value if low <= high else None

    def specified_dimensions(self) -> list[str]:
        """Names of the dimensions that will contribute to a score."""
        dims: list[str] = []
        if self.acidity is not None:
            dims.append("acidity")
        if self.tannins is not None:
            dims.append("tannins")
        if self.body_weight is not None:
            dims.append("bodyWeight")
        if self.flavor_notes:
            dims.append("flavorNotes")
        if self.sweetness is not None:
            dims.append("sweetness")
        if self.price_range is not None:
            dims.append("priceRange")
        if self.wine_type != WineTypePreference.any:
            dims.append("wineType")
        return dims


class WineMatch(WineRecord):
    match_score: float = Field(..., ge=0.0, le=1.0, alias="matchScore")


class MatchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    restaurant_id: str = Field(..., min_length=1, alias="restaurantId")
    user_preferences: PreferenceVector = Field(..., alias="userPreferences")


class MatchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    restaurant_id: str = Field(..., alias="restaurantId")
    user_preferences: PreferenceVector = Field(..., alias="userPreferences")
    matches: list[WineMatch]
    total_matches: int = Field(..., alias="totalMatches")
    inconclusive: bool = False
