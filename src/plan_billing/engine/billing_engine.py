"""
Billing Engine - runs billing requests through the plan factory.

For each request, in order:
1. Resolve the rate plan for the request category
2. Assign the plan rate
3. Calculate the bill for the consumed units
4. Report category, quantity and amount
"""
import logging
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional

from ..config.settings import get_settings, configure_logging, Settings
from .factory import PlanFactory
from .models import BillingRequest, BillResult, PlanCategory

logger = logging.getLogger(__name__)


DEFAULT_REQUESTS = (
    BillingRequest(quantity=98, category=PlanCategory.DOMESTIC),
    BillingRequest(quantity=204, category=PlanCategory.COMMERCIAL),
    BillingRequest(quantity=465, category=PlanCategory.INSTITUTIONAL),
)


class BillingEngine:
    """Bills requests using plans resolved from a PlanFactory."""

    def __init__(self, factory: Optional[PlanFactory] = None, settings: Optional[Settings] = None):
        self.factory = factory or PlanFactory.shared()
        self.settings = settings or get_settings()

    def calculate(self, request: BillingRequest) -> BillResult:
        """Bill a single request with a trace of each step."""
        plan = self.factory.resolve(request.category)
        plan.assign_rate()

        amount = plan.bill_amount(request.quantity)
        amount_text = plan.calculate_bill(request.quantity, self.settings.amount_style)

        result = BillResult(
            category=request.category,
            quantity=request.quantity,
            rate=plan.rate,
            amount=amount,
            amount_text=amount_text,
            currency_label=self.settings.currency_label,
        )
        result.add_trace("Plan Lookup", f"Resolved {request.category.label} category", type(plan).__name__)
        result.add_trace("Rate", "Per-unit rate", f"{plan.rate}")
        result.add_trace("Extension", f"Quantity {request.quantity} × {plan.rate}", amount_text)

        logger.debug("Billed %s x %d at %s = %s", request.category.label, request.quantity, plan.rate, amount_text)
        return result

    def run(self, requests: Iterable[BillingRequest]) -> list[BillResult]:
        """Bill every request in order."""
        return [self.calculate(request) for request in requests]

    def report(self, requests: Iterable[BillingRequest], out: Callable[[str], None] = print) -> list[BillResult]:
        """Bill every request and emit one report line per request."""
        results = []
        for request in requests:
            result = self.calculate(request)
            out(result.to_line())
            results.append(result)
        return results


def main(argv: Optional[list[str]] = None):
    """
    Print bills for a CSV of quantity,category rows.

    The CSV comes from the command line, then PLAN_BILLING_REQUESTS_CSV.
    Without either, the default requests are billed.

    Usage:
        python -m plan_billing [requests.csv]
    """
    argv = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    configure_logging(settings.log_level)

    csv_path = Path(argv[0]) if argv else settings.requests_csv
    requests = DEFAULT_REQUESTS
    if csv_path is not None:
        from ..data.load_requests import load_requests
        requests = load_requests(csv_path)
        logger.info("Loaded %d requests from %s", len(requests), csv_path)

    BillingEngine(settings=settings).report(requests)
