import os
import sys

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from plan_billing.config import settings as settings_module
from plan_billing.config.settings import Settings
from plan_billing.engine import BillingEngine, PlanFactory


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Reload settings from a clean environment for every test."""
    for var in ('PLAN_BILLING_REQUESTS_CSV', 'PLAN_BILLING_AMOUNT_STYLE', 'PLAN_BILLING_LOG_LEVEL'):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(settings_module, '_settings', None)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def factory():
    return PlanFactory()


@pytest.fixture
def engine(factory, settings):
    return BillingEngine(factory=factory, settings=settings)
