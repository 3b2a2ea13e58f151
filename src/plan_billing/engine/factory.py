"""
Plan Factory - maps a plan category to a freshly built rate plan.
"""
import logging
import threading
from typing import Optional, assert_never

from .errors import UnknownPlanCategoryError
from .models import PlanCategory
from .plans import RatePlan, DomesticPlan, CommercialPlan, InstitutionalPlan

logger = logging.getLogger(__name__)


class PlanFactory:
    """
    Resolves plan categories to rate plans.

    The factory holds no state, so one process-wide instance is shared through
    `shared()`. Callers that want isolation (tests, the API) can still build
    their own and pass it to BillingEngine.
    """

    _shared: Optional['PlanFactory'] = None
    _lock = threading.Lock()

    @classmethod
    def shared(cls) -> 'PlanFactory':
        """Get the process-wide factory, creating it on first access."""
        if cls._shared is None:
            with cls._lock:
                if cls._shared is None:
                    cls._shared = cls()
                    logger.debug("Created shared PlanFactory")
        return cls._shared

    def resolve(self, category: PlanCategory) -> RatePlan:
        """Build a new plan for `category`. Every call returns a new instance."""
        if not isinstance(category, PlanCategory):
            raise UnknownPlanCategoryError(f"Not a plan category: {category!r}")

        match category:
            case PlanCategory.DOMESTIC:
                return DomesticPlan()
            case PlanCategory.COMMERCIAL:
                return CommercialPlan()
            case PlanCategory.INSTITUTIONAL:
                return InstitutionalPlan()
            case _:
                assert_never(category)

    def categories(self) -> list[PlanCategory]:
        """All categories this factory can resolve, in declaration order."""
        return list(PlanCategory)
