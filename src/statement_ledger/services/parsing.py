import re
from dataclasses import dataclass
from time import perf_counter

from statement_ledger.core.errors import FormatError
from statement_ledger.domain.amounts import parse_amount
from statement_ledger.domain.dates import is_normalized_date, normalize_date
from statement_ledger.domain.descriptions import clean_description
from statement_ledger.logger import get_logger
from statement_ledger.manager import CategorizerService
from statement_ledger.models import Transaction

logger = get_logger(__name__)

DELIMITER = ";"

DATE_HEADER = "DATA CONT"
DESCRIPTION_HEADER = "DESCRIZIONE"
AMOUNT_HEADER = "IMPORTO"

_LINE_BREAK = re.compile(r"\r?\n")


@dataclass(frozen=True)
class ColumnLayout:
    date: int
    description: int
    amount: int


def _find_column(headers: list[str], marker: str) -> int | None:
    for index, header in enumerate(headers):
        if marker in header:
            return index
    return None


def resolve_columns(header_line: str) -> ColumnLayout:
    headers = header_line.split(DELIMITER)
    found = {
        marker: _find_column(headers, marker)
        for marker in (DATE_HEADER, DESCRIPTION_HEADER, AMOUNT_HEADER)
    }
    missing = [marker for marker, index in found.items() if index is None]
    if missing:
        raise FormatError(missing)
    return ColumnLayout(
        date=found[DATE_HEADER],
        description=found[DESCRIPTION_HEADER],
        amount=found[AMOUNT_HEADER],
    )


def _cell(cells: list[str], index: int) -> str:
    return cells[index] if index < len(cells) else ""


def sort_key(transaction: Transaction) -> tuple[int, str]:
    """Order key for a newest-first sort.

    Dates that could not be normalized rank below every normalized date, so
    they end up after them, in their original row order.
    """
    if is_normalized_date(transaction.date):
        return (1, transaction.date)
    return (0, "")


def sort_transactions(transactions: list[Transaction]) -> list[Transaction]:
    return sorted(transactions, key=sort_key, reverse=True)


class LedgerParser:
    def __init__(self, categorizer: CategorizerService | None = None):
        self.categorizer = categorizer or CategorizerService()

    def parse_row(self, line: str, layout: ColumnLayout) -> Transaction | None:
        cells = line.split(DELIMITER)
        if len(cells) < 2:
            return None

        amount = parse_amount(_cell(cells, layout.amount))
        if amount is None:
            return None

        description = clean_description(_cell(cells, layout.description))
        return Transaction(
            date=normalize_date(_cell(cells, layout.date).strip()),
            description=description,
            amount=amount,
            category=self.categorizer.categorize(description),
        )

    def parse(self, raw_text: str) -> list[Transaction]:
        start = perf_counter()
        lines = [line for line in _LINE_BREAK.split(raw_text) if line.strip()]
        if not lines:
            raise FormatError([DATE_HEADER, DESCRIPTION_HEADER, AMOUNT_HEADER])

        layout = resolve_columns(lines[0])
        logger.debug(f"[PARSE] Column layout: {layout}")

        transactions: list[Transaction] = []
        skipped = 0
        for line in lines[1:]:
            transaction = self.parse_row(line, layout)
            if transaction is None:
                skipped += 1
                continue
            transactions.append(transaction)

        if skipped:
            logger.debug(f"[PARSE] Skipped {skipped} malformed row(s)")
        logger.info(
            "[PARSE] Parsed %s transaction(s) in %.1f ms",
            len(transactions),
            (perf_counter() - start) * 1000,
        )
        return sort_transactions(transactions)


def parse(raw_text: str, categorizer: CategorizerService | None = None) -> list[Transaction]:
    return LedgerParser(categorizer).parse(raw_text)
