from collections.abc import Sequence

from statement_ledger.logger import get_logger
from statement_ledger.manager import CategorizerService
from statement_ledger.models import UNCATEGORIZED, LedgerReport, Transaction
from statement_ledger.services.aggregation import build_report, by_category
from statement_ledger.services.parsing import LedgerParser, sort_transactions

logger = get_logger(__name__)

ALL_CATEGORIES = "all"
UNCATEGORIZED_SELECTION = "uncategorized"


def set_category(
    transactions: Sequence[Transaction], index: int, category: str
) -> list[Transaction]:
    """Return a copy of the list with one transaction recategorized.

    Any category name is accepted, known or not.
    """
    if not 0 <= index < len(transactions):
        raise IndexError(f"Transaction index {index} out of range (0..{len(transactions) - 1})")
    updated = list(transactions)
    updated[index] = updated[index].with_category(category)
    return updated


def filter_by_category(transactions: Sequence[Transaction], selection: str) -> list[Transaction]:
    if selection == ALL_CATEGORIES:
        return list(transactions)
    if selection == UNCATEGORIZED_SELECTION:
        return [t for t in transactions if not t.category or t.category == UNCATEGORIZED]
    return [t for t in transactions if t.category == selection]


class Ledger:
    """Working set of one uploaded statement and its aggregates."""

    def __init__(self, transactions: Sequence[Transaction] = ()):
        self._transactions = sort_transactions(list(transactions))
        self._report = build_report(self._transactions)

    @classmethod
    def from_text(cls, raw_text: str, categorizer: CategorizerService | None = None) -> "Ledger":
        return cls(LedgerParser(categorizer).parse(raw_text))

    @property
    def transactions(self) -> list[Transaction]:
        return list(self._transactions)

    @property
    def report(self) -> LedgerReport:
        return self._report

    def __len__(self) -> int:
        return len(self._transactions)

    def add(self, transaction: Transaction) -> LedgerReport:
        self._transactions = sort_transactions([*self._transactions, transaction])
        self._report = build_report(self._transactions)
        logger.debug(f"[LEDGER] Added transaction dated {transaction.date}")
        return self._report

    def set_category(self, index: int, category: str) -> LedgerReport:
        self._transactions = set_category(self._transactions, index, category)
        # Summary and monthly totals do not depend on categories
        self._report = self._report.model_copy(
            update={
                "transactions": list(self._transactions),
                "categories": by_category(self._transactions),
            }
        )
        logger.info(f"[LEDGER] Transaction {index} recategorized as '{category}'")
        return self._report

    def filter(self, selection: str) -> list[Transaction]:
        return filter_by_category(self._transactions, selection)
