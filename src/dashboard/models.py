"""Result shapes returned by the dashboard queries."""

from __future__ import annotations

from dataclasses import dataclass, field

from src.common.models import SaleRecord


@dataclass
class TransactionPage:
    """One page of a filtered view.

    Maps to the API contract: { transactions, totalTransactions }
    """

    transactions: list[SaleRecord] = field(default_factory=list)
    total_transactions: int = 0  # size of the view before slicing

    def to_dict(self) -> dict:
        return {
            "transactions": [r.to_dict() for r in self.transactions],
            "totalTransactions": self.total_transactions,
        }


@dataclass
class SaleStatistics:
    """Totals for one month.

    ``total_not_sold_items`` counts every record outside the month view,
    not records flagged ``sold=False``.
    """

    total_sale_amount: int | float = 0
    total_sold_items: int = 0
    total_not_sold_items: int = 0

    def to_dict(self) -> dict:
        return {
            "totalSaleAmount": self.total_sale_amount,
            "totalSoldItems": self.total_sold_items,
            "totalNotSoldItems": self.total_not_sold_items,
        }


@dataclass
class PriceBucket:
    """One bar of the price histogram."""

    range: str
    upper_bound: float | None  # None for the open-ended last bucket
    count: int = 0

    def to_dict(self) -> dict:
        return {"range": self.range, "count": self.count}


@dataclass
class CategoryCount:
    """One slice of the category pie chart."""

    category: str
    item_count: int = 0

    def to_dict(self) -> dict:
        return {"category": self.category, "itemCount": self.item_count}


@dataclass
class CombinedResponse:
    """All four month views merged into one payload."""

    transactions: TransactionPage
    statistics: SaleStatistics
    bar_chart: list[PriceBucket]
    pie_chart: list[CategoryCount]

    def to_dict(self) -> dict:
        return {
            "transactions": [r.to_dict() for r in self.transactions.transactions],
            "statistics": self.statistics.to_dict(),
            "barChart": [b.to_dict() for b in self.bar_chart],
            "pieChart": [c.to_dict() for c in self.pie_chart],
        }
