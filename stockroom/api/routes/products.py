from typing import Optional

from fastapi import APIRouter, Depends, Query

from stockroom.api.dependencies import get_inventory
from stockroom.domain.Inventory import Inventory
from stockroom.domain.Product import parse_expiry_date
from stockroom.domain.errors import ProductNotFoundError
from stockroom.utilities.validators import ProductInput

router = APIRouter(prefix="/api")


def reference_date(as_of: Optional[str]):
    """Optional dd-mm-yyyy query value; None means today."""
    return parse_expiry_date(as_of) if as_of else None


@router.get("/products")
def list_products(inventory: Inventory = Depends(get_inventory)):
    products = [p.to_dict() for p in inventory.list_all()]
    return {"count": len(products), "capacity": inventory.capacity, "products": products}


@router.get("/products/{product_id}")
def get_product(product_id: int, inventory: Inventory = Depends(get_inventory)):
    product = inventory.find_by_id(product_id)
    if product is None:
        raise ProductNotFoundError(product_id)
    return product.to_dict()


@router.post("/products", status_code=201)
def add_product(payload: ProductInput, inventory: Inventory = Depends(get_inventory)):
    product = inventory.add_product(payload.to_product())
    return product.to_dict()


@router.post("/products/purge-expired")
def purge_expired(
    as_of: Optional[str] = Query(default=None, description="Reference date (dd-mm-yyyy), defaults to today"),
    inventory: Inventory = Depends(get_inventory),
):
    removed = inventory.remove_expired(reference_date(as_of))
    return {"removed": removed, "count": len(inventory)}
