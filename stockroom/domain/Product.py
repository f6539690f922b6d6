"""Product domain entity: id, name, price, quantity and expiration date."""
import math
from datetime import date, datetime, time
from typing import Optional, Union

from stockroom.domain.errors import InvalidDateError
from stockroom.utilities.constants import CURRENCY, DATE_FORMAT

DateLike = Union[str, date, datetime]


def parse_expiry_date(text: str) -> date:
    '''Parses a dd-mm-yyyy string into a date, raising InvalidDateError otherwise.'''
    if not isinstance(text, str):
        raise InvalidDateError(str(text))
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateError(text) from None


def _as_date(value: Optional[Union[date, datetime]]) -> date:
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    return value


class Product:
    def __init__(self, product_id: int, name: str, price: float, quantity: int, expiry_date: DateLike):
        if not math.isfinite(price):
            raise ValueError(f"Price must be a finite number: {price}")
        if price < 0:
            raise ValueError(f"Price cannot be negative: {price}")
        if quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {quantity}")
        if isinstance(expiry_date, (date, datetime)):
            expiry_date = _as_date(expiry_date)
        else:
            expiry_date = parse_expiry_date(expiry_date)
        self._product_id = int(product_id)
        self._name = name
        self._price = float(price)
        self._quantity = int(quantity)
        self._expiry_date = expiry_date

    @property
    def product_id(self) -> int:
        return self._product_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> float:
        return self._price

    @property
    def expiry_date(self) -> date:
        return self._expiry_date

    @property
    def quantity(self) -> int:
        return self._quantity

    @quantity.setter
    def quantity(self, value: int):
        if value < 0:
            raise ValueError(f"Quantity cannot be negative: {value}")
        self._quantity = int(value)

    def is_expired(self, now: Optional[Union[date, datetime]] = None) -> bool:
        '''
        True when `now` is strictly after the expiry date.
        A datetime (or None, meaning the current time) is compared against
        midnight at the start of the expiry day; a plain date compares by day.
        '''
        if now is None:
            now = datetime.now()
        if isinstance(now, datetime):
            return now > datetime.combine(self._expiry_date, time.min, tzinfo=now.tzinfo)
        return now > self._expiry_date

    def display(self) -> str:
        return (
            f"ID: {self.product_id} | Name: {self.name} | Price: {CURRENCY} {self.price} | "
            f"Quantity: {self.quantity} | Expiry Date: {self.expiry_date.strftime(DATE_FORMAT)}"
        )

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return (
            f"Product(product_id={self.product_id!r}, name={self.name!r}, price={self.price!r}, "
            f"quantity={self.quantity!r}, expiry_date={self.expiry_date.strftime(DATE_FORMAT)!r})"
        )

    def to_dict(self):
        '''Converts the Product to a dictionary for JSON responses.'''
        return {
            "id": self.product_id,
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
            "expiry_date": self.expiry_date.strftime(DATE_FORMAT),
        }
