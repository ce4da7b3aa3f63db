"""The ten taste archetypes a quiz can resolve to."""
from __future__ import annotations

from .models import QuizProfile


def _profile(
    profile_id: str,
    name: str,
    wine_type: str,
    dimensions: dict[str, int],
    characteristics: dict,
) -> QuizProfile:
    return QuizProfile.model_validate({
        "id": profile_id,
        "name": name,
        "wineType": wine_type,
        "dimensions": dimensions,
        "characteristics": characteristics,
    })


PROFILES: tuple[QuizProfile, ...] = (
    _profile(
        "full-bodied-red-enthusiast",
        "Full-Bodied Red Enthusiast",
        "red",
        {"acidity": 45, "tannins": 90, "body": 90, "sweetness": 15, "intensity": 75},
        {
            "acidity": "medium",
            "tannins": "high",
            "bodyWeight": "full",
            "sweetness": "dry",
            "flavorNotes": ("oak", "spice", "cherry"),
        },
    ),
    _profile(
        "medium-bodied-red-aficionado",
        "Medium-Bodied Red Aficionado",
        "red",
        {"acidity": 60, "tannins": 30, "body": 45, "sweetness": 30, "intensity": 60},
        {
            "acidity": "medium",
            "tannins": "low",
            "bodyWeight": "medium",
            "sweetness": "medium",
            "flavorNotes": ("cherry", "berry", "vanilla"),
        },
    ),
    _profile(
        "spiced-red-connoisseur",
        "Spiced Red Connoisseur",
        "red",
        {"acidity": 45, "tannins": 75, "body": 90, "sweetness": 15, "intensity": 75},
        {
            "acidity": "medium",
            "tannins": "medium",
            "bodyWeight": "full",
            "sweetness": "dry",
            "flavorNotes": ("spice", "cherry", "oak"),
        },
    ),
    _profile(
        "light-bodied-red-devotee",
        "Light-Bodied Red Devotee",
        "red",
        {"acidity": 75, "tannins": 30, "body": 30, "sweetness": 15, "intensity": 45},
        {
            "acidity": "high",
            "tannins": "low",
            "bodyWeight": "light",
            "sweetness": "dry",
            "flavorNotes": ("berry", "floral", "citrus"),
        },
    ),
    _profile(
        "crisp-acidic-white-enthusiast",
        "Crisp & Acidic White Enthusiast",
        "white",
        {"acidity": 90, "tannins": 15, "body": 30, "sweetness": 15, "intensity": 75},
        {
            "acidity": "high",
            "tannins": "low",
            "bodyWeight": "light",
            "sweetness": "dry",
            "flavorNotes": ("citrus", "floral"),
        },
    ),
    _profile(
        "full-bodied-white-aficionado",
        "Full-Bodied White Aficionado",
        "white",
        {"acidity": 45, "tannins": 15, "body": 90, "sweetness": 15, "intensity": 75},
        {
            "acidity": "low",
            "tannins": "low",
            "bodyWeight": "full",
            "sweetness": "dry",
            # "butter" is outside the approved flavor list, so it never matches a wine
            "flavorNotes": ("oak", "vanilla", "butter"),
        },
    ),
    _profile(
        "aromatic-white-connoisseur",
        "Aromatic White Connoisseur",
        "white",
        {"acidity": 60, "tannins": 15, "body": 45, "sweetness": 60, "intensity": 60},
        {
            "acidity": "medium",
            "tannins": "low",
            "bodyWeight": "medium",
            "sweetness": "medium",
            "flavorNotes": ("floral", "citrus", "spice"),
        },
    ),
    _profile(
        "fruit-forward-white-devotee",
        "Fruit-Forward White Devotee",
        "white",
        {"acidity": 45, "tannins": 15, "body": 45, "sweetness": 60, "intensity": 45},
        {
            "acidity": "medium",
            "tannins": "low",
            "bodyWeight": "medium",
            "sweetness": "medium",
            "flavorNotes": ("citrus", "berry"),
        },
    ),
    _profile(
        "sparkling-wine-enthusiast",
        "Sparkling Wine Enthusiast",
        "sparkling",
        {"acidity": 75, "tannins": 15, "body": 30, "sweetness": 15, "intensity": 45},
        {
            "acidity": "high",
            "tannins": "low",
            "bodyWeight": "light",
            "sweetness": "dry",
            "flavorNotes": ("citrus", "floral"),
        },
    ),
    _profile(
        "dessert-wine-aficionado",
        "Dessert Wine Aficionado",
        "dessert",
        {"acidity": 45, "tannins": 45, "body": 60, "sweetness": 90, "intensity": 75},
        {
            "acidity": "low",
            "tannins": "low",
            "bodyWeight": "medium",
            "sweetness": "sweet",
            "flavorNotes": ("berry", "vanilla"),
        },
    ),
)
