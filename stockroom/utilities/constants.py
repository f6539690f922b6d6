from typing import Final

DATE_FORMAT: Final[str] = "%d-%m-%Y"
DATE_FORMAT_HINT: Final[str] = "dd-MM-yyyy"
MAX_PRODUCTS: Final[int] = 100
FINISH_SALE: Final[int] = -1
CURRENCY: Final[str] = "RS."
DAYS_BEFORE_EXPIRY: Final[int] = 5
LOW_STOCK_THRESHOLD: Final[int] = 5
RECORD_FIELDS: Final[tuple[str, ...]] = ("id", "name", "price", "quantity", "expiry_date")
MENU_OPTIONS: Final[tuple[str, ...]] = (
    "Display Inventory",
    "Add Product",
    "Generate Bill",
    "Remove Expired Products",
    "Exit",
)
