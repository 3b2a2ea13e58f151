"""Engine subpackage - plan resolution and bill calculation."""
from .billing_engine import BillingEngine, DEFAULT_REQUESTS
from .factory import PlanFactory
from .models import PlanCategory, BillingRequest, BillResult
from .plans import RatePlan, DomesticPlan, CommercialPlan, InstitutionalPlan

__all__ = [
    'BillingEngine', 'DEFAULT_REQUESTS', 'PlanFactory',
    'PlanCategory', 'BillingRequest', 'BillResult',
    'RatePlan', 'DomesticPlan', 'CommercialPlan', 'InstitutionalPlan',
]
