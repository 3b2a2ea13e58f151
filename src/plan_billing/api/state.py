"""Shared engine instance for the API process."""
from ..engine import BillingEngine, PlanFactory

engine = BillingEngine(factory=PlanFactory.shared())
