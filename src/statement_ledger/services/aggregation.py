"""Aggregates derived from a transaction list.

Every function recomputes from scratch; statements are small enough that
nothing is cached or patched incrementally.
"""

from collections.abc import Sequence

from statement_ledger.models import (
    UNCATEGORIZED,
    CategoryAggregate,
    LedgerReport,
    MonthlyAggregate,
    Summary,
    Transaction,
)


def summarize(transactions: Sequence[Transaction]) -> Summary:
    expenses = [t.amount for t in transactions if t.amount < 0]
    total_expenses = abs(sum(expenses))
    return Summary(
        total_expenses=total_expenses,
        total_income=sum(t.amount for t in transactions if t.amount > 0),
        average_expense=total_expenses / len(expenses) if expenses else 0.0,
        transaction_count=len(transactions),
    )


def monthly(transactions: Sequence[Transaction]) -> list[MonthlyAggregate]:
    """Net amount per month, split into its positive or negative part.

    A month where income and expenses cancel out reports zero for both.
    """
    totals: dict[str, float] = {}
    for t in transactions:
        month = t.date[:7]
        totals[month] = totals.get(month, 0.0) + t.amount

    return [
        MonthlyAggregate(month=month, expenses=abs(min(net, 0.0)), income=max(net, 0.0))
        for month, net in sorted(totals.items())
    ]


def by_category(transactions: Sequence[Transaction]) -> list[CategoryAggregate]:
    totals: dict[str, float] = {}
    for t in transactions:
        if t.amount < 0:
            category = t.category or UNCATEGORIZED
            totals[category] = totals.get(category, 0.0) + abs(t.amount)
    return [CategoryAggregate(category=category, amount=amount) for category, amount in totals.items()]


def build_report(transactions: Sequence[Transaction]) -> LedgerReport:
    return LedgerReport(
        transactions=list(transactions),
        summary=summarize(transactions),
        monthly=monthly(transactions),
        categories=by_category(transactions),
    )
