from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List
import logging

from plan_billing import __version__
from plan_billing.engine import BillingRequest, PlanCategory
from plan_billing.engine.errors import PlanBillingError
from plan_billing.config.settings import get_settings
from plan_billing.api.state import engine

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Plan Billing API",
    description="Bills consumed units against Domestic, Commercial and Institutional plans",
    version=__version__
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class BillItem(BaseModel):
    quantity: int
    category: str


class BillBatch(BaseModel):
    requests: List[BillItem]


@app.get("/")
async def root():
    return {"status": "online", "message": "Plan Billing API Active"}


@app.get("/plans")
async def list_plans():
    plans = []
    for category in engine.factory.categories():
        plan = engine.factory.resolve(category)
        plans.append({"category": category.label, "rate": plan.rate})
    return {"plans": plans}


@app.post("/calculate")
async def calculate_bills(batch: BillBatch):
    try:
        requests = [
            BillingRequest(quantity=item.quantity, category=PlanCategory.parse(item.category))
            for item in batch.requests
        ]
    except PlanBillingError as e:
        raise HTTPException(status_code=422, detail=str(e))

    results = engine.run(requests)
    logger.info("Billed %d request(s)", len(results))
    return {"bills": [r.to_dict() for r in results]}


@app.get("/system/status")
async def get_status():
    settings = get_settings()
    return {
        "engine_active": True,
        "amount_style": settings.amount_style,
        "categories": [c.label for c in engine.factory.categories()],
    }
