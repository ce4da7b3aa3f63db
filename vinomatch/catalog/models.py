from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class WineType(str, Enum):
    red = "red"
    white = "white"
    rose = "rosé"
    sparkling = "sparkling"
    dessert = "dessert"


class Intensity(str, Enum):
    """Shared scale for acidity and tannins."""

    low = "low"
    medium = "medium"
    high = "high"


class BodyWeight(str, Enum):
    light = "light"
    medium = "medium"
    full = "full"


class Sweetness(str, Enum):
    dry = "dry"
    medium = "medium"
    sweet = "sweet"


APPROVED_FLAVORS: tuple[str, ...] = (
    "oak",
    "cherry",
    "citrus",
    "berry",
    "vanilla",
    "spice",
    "floral",
    "chocolate",
    "earthy",
    "tropical",
    "herbal",
    "honey",
    "pear",
    "biscuit",
)

# Fields the AI estimator may flag as uncertain.
SENSORY_FIELDS: tuple[str, ...] = (
    "acidity",
    "tannins",
    "bodyWeight",
    "sweetnessLevel",
    "flavorProfile",
)


class WineRecord(BaseModel):
    """One wine on a restaurant list.

    Named either structurally (producer / varietal / region) or by a single
    legacy ``name``; never both.
    """

    model_config = ConfigDict(populate_by_name=True)

    wine_id: str | None = Field(default=None, alias="wineId")
    year: str | None = None
    producer: str | None = None
    varietal: str | None = None
    region: str | None = None
    name: str | None = None
    type: WineType | None = None
    price: float = Field(default=0.0, ge=0.0)
    acidity: Intensity | None = None
    tannins: Intensity | None = None
    body_weight: BodyWeight | None = Field(default=None, alias="bodyWeight")
    sweetness_level: Sweetness | None = Field(default=None, alias="sweetnessLevel")
    flavor_profile: list[str] = Field(default_factory=list, alias="flavorProfile")
    low_confidence: list[str] = Field(default_factory=list, alias="lowConfidence")

    @field_validator("year", mode="before")
    @classmethod
    def _year_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(int(value))
        return value

    @field_validator("price", mode="before")
    @classmethod
    def _missing_price_is_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    @model_validator(mode="after")
    def _check_naming(self) -> WineRecord:
        structured = any((self.producer, self.varietal, self.region))
        if structured and self.name:
            raise ValueError("wine has both a legacy name and producer/varietal/region")
        if not structured and not self.name:
            raise ValueError("wine needs producer/varietal/region or a legacy name")
        return self

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        parts = [self.year, self.producer, self.varietal]
        return " ".join(p for p in parts if p)
