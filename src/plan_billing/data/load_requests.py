"""
Load billing requests from a CSV file with quantity and category columns.
"""
import logging
from pathlib import Path

import pandas as pd

from ..engine.errors import InvalidQuantityError
from ..engine.models import BillingRequest, PlanCategory

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ('quantity', 'category')


def load_requests(path: Path) -> list[BillingRequest]:
    """
    Read requests in file order.

    Raises FileNotFoundError for a missing file, ValueError for missing
    columns, and the billing input errors for bad rows.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Billing requests file not found at {path}.")

    requests = requests_from_frame(pd.read_csv(path, dtype=str), source=path.name)
    logger.debug("Read %d billing requests from %s", len(requests), path)
    return requests


def requests_from_frame(df: pd.DataFrame, source: str = "requests") -> list[BillingRequest]:
    """Convert a string-typed frame of quantity/category rows into requests."""
    df = df.fillna('')
    df.columns = [str(c).strip().lower() for c in df.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{source} is missing column(s): {', '.join(missing)}")

    requests = []
    # Row 1 is the header
    for row_num, row in enumerate(df.itertuples(index=False), start=2):
        raw_qty = str(row.quantity).strip()
        try:
            quantity = int(raw_qty)
        except ValueError:
            raise InvalidQuantityError(f"Row {row_num}: quantity {raw_qty!r} is not an integer") from None
        requests.append(BillingRequest(quantity=quantity, category=PlanCategory.parse(row.category)))

    return requests
