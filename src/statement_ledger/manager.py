from statement_ledger.classifiers.base import Classifier
from statement_ledger.classifiers.keywords import DEFAULT_CATEGORY_RULES, CategoryRule, KeywordClassifier
from statement_ledger.logger import get_logger
from statement_ledger.models import UNCATEGORIZED

logger = get_logger(__name__)


class CategorizerService:
    def __init__(self, rules: tuple[CategoryRule, ...] = DEFAULT_CATEGORY_RULES):
        self.keywords = KeywordClassifier(rules)
        self.classifiers: list[Classifier] = [self.keywords]

    @property
    def category_names(self) -> list[str]:
        return [*self.keywords.category_names, UNCATEGORIZED]

    def categorize(self, description: str) -> str:
        for classifier in self.classifiers:
            classifier_name = classifier.__class__.__name__
            category = classifier.classify(description)
            if category:
                logger.debug(f"{classifier_name} matched '{category}' for: '{description[:50]}'")
                return category

        logger.debug(f"No classifier matched for: '{description[:50]}'")
        return UNCATEGORIZED
