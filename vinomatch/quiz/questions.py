"""
Quiz questions and the scoring matrix.

Each question's choice ``i`` awards the points listed in ``SCORING_MATRIX[q][i]``.
Strong correlations earn 3 points, standard ones 2, weak ones 1. The two
rarer profiles (sparkling, dessert) have fewer signature answers and reach
lower maxima, which is why ties are broken at random.
"""
from __future__ import annotations

from dataclasses import dataclass

from .models import QuizQuestion


@dataclass(frozen=True)
class Award:
    profile_id: str
    points: int


FULL_RED = "full-bodied-red-enthusiast"
MEDIUM_RED = "medium-bodied-red-aficionado"
SPICED_RED = "spiced-red-connoisseur"
LIGHT_RED = "light-bodied-red-devotee"
CRISP_WHITE = "crisp-acidic-white-enthusiast"
FULL_WHITE = "full-bodied-white-aficionado"
AROMATIC_WHITE = "aromatic-white-connoisseur"
FRUIT_WHITE = "fruit-forward-white-devotee"
SPARKLING = "sparkling-wine-enthusiast"
DESSERT = "dessert-wine-aficionado"


QUESTIONS: tuple[QuizQuestion, ...] = (
    QuizQuestion(id=1, question="How do you like your coffee?", choices=(
        "Black, no sugar",
        "With cream and sugar",
        "I prefer tea or juice",
    )),
    QuizQuestion(id=2, question="Dark chocolate or milk chocolate?", choices=(
        "Dark chocolate (85%+ cacao)",
        "Milk chocolate",
        "White chocolate or fruity candy",
    )),
    QuizQuestion(id=3, question="What's your go-to tea?", choices=(
        "Black tea, unsweetened",
        "Green tea or herbal tea",
        "Fruit tea or sweet iced tea",
    )),
    QuizQuestion(id=4, question="How do you feel about sour/tangy flavors?", choices=(
        "Love them! Gimme all the citrus",
        "Like them in moderation",
        "Prefer milder, less tangy flavors",
    )),
    QuizQuestion(id=5, question="What salad dressing do you prefer?", choices=(
        "Vinaigrette or lemon juice",
        "Ranch or Caesar",
        "Creamy or oil-based",
    )),
    QuizQuestion(id=6, question="What's your ideal morning drink?", choices=(
        "Orange juice or grapefruit juice",
        "Smoothie or fruit blend",
        "Hot chocolate or creamy latte",
    )),
    QuizQuestion(id=7, question="Which meal sounds most appealing?", choices=(
        "Grilled steak with bold sauce",
        "Roasted chicken with herbs",
        "Fresh fish with lemon",
    )),
    QuizQuestion(id=8, question="What soup do you crave?", choices=(
        "Rich, creamy chowder or bisque",
        "Tomato soup or minestrone",
        "Clear broth or light gazpacho",
    )),
    QuizQuestion(id=9, question="What pasta sauce is your favorite?", choices=(
        "Hearty meat sauce or Bolognese",
        "Tomato basil or marinara",
        "Light olive oil or pesto",
    )),
    QuizQuestion(id=10, question="How do you feel about dessert?", choices=(
        "Must have dessert every meal!",
        "Sometimes, when I'm in the mood",
        "Rarely eat sweets, prefer savory",
    )),
    QuizQuestion(id=11, question="How sweet do you like your drinks?", choices=(
        "The sweeter the better",
        "A little sweetness is nice",
        "I prefer unsweetened/dry",
    )),
    QuizQuestion(id=12, question="How do you handle spice?", choices=(
        "Bring on the heat!",
        "Medium spice is perfect",
        "Mild flavors please",
    )),
    QuizQuestion(id=13, question="Fresh herbs or earthy flavors?", choices=(
        "Love fresh herbs and floral flavors",
        "Prefer earthy, woody flavors",
        "Fruity and bright flavors",
    )),
    QuizQuestion(id=14, question="What fruits do you gravitate toward?", choices=(
        "Berries and cherries",
        "Tropical fruits (pineapple, mango)",
        "Citrus fruits (lemon, lime, orange)",
    )),
    QuizQuestion(id=15, question="What's your ideal dining occasion?", choices=(
        "Celebration with friends",
        "Cozy dinner at home",
        "Fancy steakhouse dinner",
        "Brunch or light lunch",
    )),
)


SCORING_MATRIX: tuple[tuple[tuple[Award, ...], ...], ...] = (
    # Q1 coffee
    ((Award(FULL_RED, 3),), (Award(MEDIUM_RED, 2),), (Award(LIGHT_RED, 2),)),
    # Q2 chocolate
    ((Award(SPICED_RED, 3),), (Award(FULL_WHITE, 2),), (Award(AROMATIC_WHITE, 2),)),
    # Q3 tea
    ((Award(FULL_RED, 2),), (Award(LIGHT_RED, 3),), (Award(FRUIT_WHITE, 2),)),
    # Q4 acidity
    ((Award(CRISP_WHITE, 3),), (Award(FRUIT_WHITE, 2),), (Award(MEDIUM_RED, 2),)),
    # Q5 salad dressing
    ((Award(CRISP_WHITE, 2),), (Award(SPARKLING, 2),), (Award(SPICED_RED, 2),)),
    # Q6 morning drink
    ((Award(SPARKLING, 2),), (Award(FRUIT_WHITE, 3),), (Award(AROMATIC_WHITE, 3),)),
    # Q7 meal
    ((Award(FULL_RED, 3),), (Award(SPICED_RED, 2),), (Award(LIGHT_RED, 2),)),
    # Q8 soup
    ((Award(CRISP_WHITE, 2),), (Award(MEDIUM_RED, 3),), (Award(LIGHT_RED, 2),)),
    # Q9 pasta sauce
    ((Award(FULL_RED, 2),), (Award(MEDIUM_RED, 2),), (Award(SPICED_RED, 3),)),
    # Q10 dessert
    ((Award(DESSERT, 2),), (Award(AROMATIC_WHITE, 2),), (Award(SPARKLING, 1),)),
    # Q11 drink sweetness
    ((Award(DESSERT, 2),), (Award(FRUIT_WHITE, 2),), (Award(LIGHT_RED, 2),)),
    # Q12 spice
    ((Award(SPICED_RED, 2),), (Award(MEDIUM_RED, 2),), (Award(CRISP_WHITE, 3),)),
    # Q13 herbs vs earth
    ((Award(AROMATIC_WHITE, 2),), (Award(SPARKLING, 1),), (Award(FRUIT_WHITE, 2),)),
    # Q14 fruit
    ((Award(SPICED_RED, 2),), (Award(DESSERT, 1),), (Award(LIGHT_RED, 3),)),
    # Q15 dining occasion
    (
        (Award(SPARKLING, 2),),
        (Award(FULL_WHITE, 2),),
        (Award(MEDIUM_RED, 3),),
        (Award(DESSERT, 1),),
    ),
)
