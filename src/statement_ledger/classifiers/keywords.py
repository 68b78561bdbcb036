from dataclasses import dataclass

from .base import Classifier


@dataclass(frozen=True)
class CategoryRule:
    name: str
    keywords: tuple[str, ...]

    def matches(self, description: str) -> bool:
        return any(keyword.lower() in description for keyword in self.keywords)


# Evaluated top to bottom; the first rule with a matching keyword wins.
DEFAULT_CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        name="Grocery",
        keywords=("supermarket", "grocery", "market", "food", "carrefour", "auchan", "lidl", "aldi"),
    ),
    CategoryRule(
        name="Rent",
        keywords=("rent", "house", "apartment", "lease", "housing"),
    ),
    CategoryRule(
        name="Salary",
        keywords=("salary", "wage", "payroll", "stipend"),
    ),
    CategoryRule(
        name="Transportation",
        keywords=("uber", "taxi", "train", "bus", "metro", "fuel", "gas"),
    ),
    CategoryRule(
        name="Restaurant",
        keywords=("restaurant", "cafe", "bar", "dining"),
    ),
)


class KeywordClassifier(Classifier):
    def __init__(self, rules: tuple[CategoryRule, ...] = DEFAULT_CATEGORY_RULES):
        self.rules = tuple(rules)

    @property
    def category_names(self) -> list[str]:
        return [rule.name for rule in self.rules]

    def classify(self, description: str) -> str | None:
        lowered = description.lower()
        for rule in self.rules:
            if rule.matches(lowered):
                return rule.name
        return None
