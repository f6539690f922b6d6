from typing import Optional

from fastapi import APIRouter, Depends, Query

from stockroom.api.dependencies import get_billing
from stockroom.api.routes.products import reference_date
from stockroom.domain.Billing import Billing
from stockroom.utilities.validators import SaleInput

router = APIRouter(prefix="/api")


@router.post("/sales")
def create_sale(
    payload: SaleInput,
    as_of: Optional[str] = Query(default=None, description="Reference date (dd-mm-yyyy), defaults to today"),
    billing: Billing = Depends(get_billing),
):
    """Run one sale session over the submitted lines.

    Lines that fail (unknown product, expired, not enough stock) are listed in
    `rejected`; the rest of the sale still goes through.
    """
    now = reference_date(as_of)
    bill = billing.process_order(((item.product_id, item.quantity) for item in payload.items), now=now)
    return bill.to_dict()
