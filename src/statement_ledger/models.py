from typing import Literal

from pydantic import BaseModel, ConfigDict, computed_field

UNCATEGORIZED = "Uncategorized"

TransactionType = Literal["expense", "income"]


class Transaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str # YYYY-MM-DD, or the raw cell when it could not be normalized
    description: str
    amount: float
    category: str = UNCATEGORIZED

    @computed_field  # type: ignore[prop-decorator]
    @property
    def type(self) -> TransactionType:
        return "expense" if self.amount < 0 else "income"

    def with_category(self, category: str) -> "Transaction":
        return self.model_copy(update={"category": category})


class Summary(BaseModel):
    total_expenses: float = 0.0
    total_income: float = 0.0
    average_expense: float = 0.0
    transaction_count: int = 0


class MonthlyAggregate(BaseModel):
    month: str # YYYY-MM
    expenses: float
    income: float


class CategoryAggregate(BaseModel):
    category: str
    amount: float


class LedgerReport(BaseModel):
    transactions: list[Transaction]
    summary: Summary
    monthly: list[MonthlyAggregate]
    categories: list[CategoryAggregate]
