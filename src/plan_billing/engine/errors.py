"""Exceptions raised at the billing input boundaries."""


class PlanBillingError(ValueError):
    """Base class for billing input errors."""


class UnknownPlanCategoryError(PlanBillingError):
    """Raised when a label or value does not name a supported plan category."""


class InvalidQuantityError(PlanBillingError):
    """Raised when a consumed quantity is not a non-negative integer."""
