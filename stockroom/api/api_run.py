from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging

from stockroom.domain.errors import InventoryError
from stockroom.events.web_observers import start as start_event_observers
from stockroom.api.routes import products, sales, reports
from stockroom.utilities.config import DEBUG

# Logging
logger = logging.getLogger("stockroom_app")

# HTTP status per error code; anything unlisted is a 400
ERROR_STATUS = {
    "invalid_date": 422,
    "malformed_input": 422,
    "inventory_full": 409,
    "duplicate_product": 409,
    "product_not_found": 404,
    "product_expired": 409,
    "insufficient_stock": 409,
}

# Initialize FastAPI app
app = FastAPI(title="Stockroom Inventory & Billing API", debug=DEBUG)

# Include routers
app.include_router(products.router)
app.include_router(sales.router)
app.include_router(reports.router)


@app.on_event("startup")
def _startup():
    try:
        start_event_observers()
    except Exception as e:
        logger.warning(f"Failed to start activity feed observers: {e}")


@app.exception_handler(InventoryError)
async def handle_inventory_error(request: Request, exc: InventoryError) -> JSONResponse:
    status_code = ERROR_STATUS.get(exc.code, 400)
    logger.warning(f"{request.method} {request.url.path} -> {status_code} {exc.code}: {exc.detail}")
    return JSONResponse(status_code=status_code, content=exc.to_dict())


@app.get("/api/health")
def health():
    return {"status": "ok"}
