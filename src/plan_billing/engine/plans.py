"""
Rate plans - one class per plan category.

Each variant only supplies its rate. Billing math lives once on RatePlan.
"""
from abc import ABC, abstractmethod

from .formatting import format_amount
from .models import PlanCategory, check_quantity


class RatePlan(ABC):
    """
    A per-unit price that can bill a consumed quantity.

    The rate is assigned while the plan is constructed, so a plan is never
    usable with the initial zero rate.
    """

    category: PlanCategory

    def __init__(self):
        self.rate: float = 0.0
        self.assign_rate()

    @abstractmethod
    def assign_rate(self):
        """Set `rate` to this plan's fixed per-unit price."""

    def bill_amount(self, quantity: int) -> float:
        """Numeric bill for `quantity` units. Raises InvalidQuantityError outside 0..MAX_QUANTITY."""
        return self.rate * check_quantity(quantity)

    def calculate_bill(self, quantity: int, amount_style: str = "raw") -> str:
        """Bill for `quantity` units, as text."""
        return format_amount(self.bill_amount(quantity), amount_style)

    def __repr__(self):
        return f"{type(self).__name__}(rate={self.rate})"


class DomesticPlan(RatePlan):
    category = PlanCategory.DOMESTIC

    def assign_rate(self):
        self.rate = 3.50


class CommercialPlan(RatePlan):
    category = PlanCategory.COMMERCIAL

    def assign_rate(self):
        self.rate = 7.50


class InstitutionalPlan(RatePlan):
    category = PlanCategory.INSTITUTIONAL

    def assign_rate(self):
        self.rate = 5.50
