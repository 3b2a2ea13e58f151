"""
Data models for the billing engine.

Uses dataclasses for structured, type-safe data representation.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .errors import UnknownPlanCategoryError, InvalidQuantityError


# Largest billable quantity. Products at every plan rate stay exact in a float.
MAX_QUANTITY = 10 ** 15


def check_quantity(quantity) -> int:
    """Return `quantity` if it is a billable unit count, else raise InvalidQuantityError."""
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidQuantityError(f"Quantity must be an integer, got {quantity!r}")
    if quantity < 0:
        raise InvalidQuantityError(f"Quantity must be non-negative, got {quantity}")
    if quantity > MAX_QUANTITY:
        raise InvalidQuantityError(f"Quantity must not exceed {MAX_QUANTITY}, got {quantity}")
    return quantity


class PlanCategory(Enum):
    """Closed set of plan categories. The value is the display label."""
    DOMESTIC = "Domestic"
    COMMERCIAL = "Commercial"
    INSTITUTIONAL = "Institutional"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, label) -> 'PlanCategory':
        """
        Convert user input into a category.

        Accepts a member, its label or its name in any case.
        Raises UnknownPlanCategoryError for anything else.
        """
        if isinstance(label, cls):
            return label
        text = str(label).strip().lower()
        for category in cls:
            if text in (category.value.lower(), category.name.lower()):
                return category
        valid = ", ".join(c.value for c in cls)
        raise UnknownPlanCategoryError(f"Unknown plan category {label!r}. Expected one of: {valid}")


@dataclass
class TraceStep:
    """A single step in the bill resolution trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass(frozen=True)
class BillingRequest:
    """Units consumed under a plan category."""
    quantity: int
    category: PlanCategory

    def __post_init__(self):
        check_quantity(self.quantity)
        if not isinstance(self.category, PlanCategory):
            raise UnknownPlanCategoryError(f"Not a plan category: {self.category!r}")


@dataclass
class BillResult:
    """Complete result of billing one request."""
    category: PlanCategory
    quantity: int
    rate: float
    amount: float
    amount_text: str
    currency_label: str = "Rs."
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the trace for this bill."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)

    def to_line(self) -> str:
        """The console report line for this bill."""
        return (
            f"Bill for your {self.category.label} plan with {self.quantity} unit(s) "
            f"consumed is {self.currency_label} {self.amount_text}"
        )

    def to_dict(self) -> dict:
        return {
            "category": self.category.label,
            "quantity": self.quantity,
            "rate": self.rate,
            "amount": self.amount,
            "amount_text": self.amount_text,
            "line": self.to_line(),
            "trace": [
                {"step": t.step, "description": t.description, "value": t.value}
                for t in self.trace
            ],
        }
