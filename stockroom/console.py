"""Text-menu driver for the inventory.

Reads operator input, validates it and passes plain values into Inventory and
Billing. Input and output callables are injected so the loop can be scripted.
"""
import logging
from datetime import date
from typing import Callable, Optional

from pydantic import ValidationError

from stockroom.domain.Billing import Billing
from stockroom.domain.Inventory import Inventory
from stockroom.domain.errors import InventoryError
from stockroom.events.Event_Bus import PRODUCT_EXPIRED
from stockroom.utilities.constants import CURRENCY, DATE_FORMAT_HINT, FINISH_SALE, MENU_OPTIONS
from stockroom.utilities.validators import ProductInput

logger = logging.getLogger(__name__)

EXIT_CHOICE = len(MENU_OPTIONS)


class ConsoleApp:
    def __init__(self, inventory: Inventory, billing: Optional[Billing] = None,
                 input_fn: Callable[[str], str] = input, output: Callable[[str], None] = print,
                 now: Optional[date] = None):
        self.inventory = inventory
        self.billing = billing or Billing(inventory)
        self._input = input_fn
        self._print = output
        self.now = now

    # --- Input helpers ------------------------------------------------------
    def _read_number(self, prompt: str, parse: Callable[[str], float], error_message: str):
        # Re-prompts until the value parses; EOFError propagates to run()
        while True:
            raw = self._input(prompt)
            try:
                return parse(raw.strip())
            except ValueError:
                self._print(error_message)

    def read_int(self, prompt: str, field: str) -> int:
        return self._read_number(prompt, int, f"Invalid input. Please enter a valid number for {field}.")

    def read_float(self, prompt: str, field: str) -> float:
        return self._read_number(prompt, float, f"Invalid input. Please enter a valid number for {field}.")

    # --- Menu actions -------------------------------------------------------
    def display_inventory(self):
        has_products = False
        for product in self.inventory.list_all():
            self._print(product.display())
            has_products = True
        if not has_products:
            self._print("No products available in inventory.")

    def add_product(self):
        product_id = self.read_int("Enter Product ID: ", "Product ID")
        name = self._input("Enter Product Name: ")
        price = self.read_float("Enter Product Price: ", "Product Price")
        quantity = self.read_int("Enter Product Quantity: ", "Product Quantity")
        expiry = self._input(f"Enter Expiry Date ({DATE_FORMAT_HINT}): ")
        try:
            data = ProductInput(id=product_id, name=name, price=price, quantity=quantity, expiry_date=expiry)
        except ValidationError as e:
            for err in e.errors():
                field = ".".join(str(loc) for loc in err.get("loc", ()))
                self._print(f"Invalid {field}: {err.get('msg')}")
            return
        try:
            self.inventory.add_product(data.to_product())
        except InventoryError as e:
            self._print(f"Error: {e.detail}")
            return
        self._print("Product added successfully!")

    def generate_bill(self):
        session = self.billing.start_session()
        while True:
            product_id = self.read_int(f"Enter Product ID to buy (or {FINISH_SALE} to finish): ", "Product ID")
            if product_id == FINISH_SALE:
                break
            try:
                session.check_item(product_id, self.now)
            except InventoryError as e:
                session.reject(product_id, 0, e)
                self._print(e.detail)
                continue
            quantity = self.read_int("Enter quantity to buy: ", "quantity")
            try:
                line = session.add_item(product_id, quantity, self.now)
            except InventoryError as e:
                self._print(e.detail)
                continue
            self._print(f"Added {line.name} to your bill.")
        bill = session.finish(self.now)
        self._print("\nYour Bill:")
        self._print(f"Total Amount: {CURRENCY} {bill.total:.2f}")
        if session.sweep_expired:
            self._print("Expired products have been removed.")
        return bill

    def remove_expired(self):
        removed = self.inventory.remove_expired(self.now)
        self._print("Expired products have been removed.")
        return removed

    # --- Main loop ------------------------------------------------------------
    def _on_expired(self, event_name, payload):
        self._print(f"Removing expired product: {payload['product'].name}")

    def print_menu(self):
        self._print("\nMenu:")
        for number, label in enumerate(MENU_OPTIONS, start=1):
            self._print(f"{number}. {label}")

    def run(self):
        actions = {
            1: self.display_inventory,
            2: self.add_product,
            3: self.generate_bill,
            4: self.remove_expired,
        }
        bus = self.inventory.event_bus
        bus.subscribe(PRODUCT_EXPIRED, self._on_expired)
        try:
            while True:
                self.print_menu()
                choice = self._read_number(
                    "Choose an option: ", int,
                    f"Invalid choice. Please enter a number between 1 and {EXIT_CHOICE}.",
                )
                if choice == EXIT_CHOICE:
                    self._print("Exiting the system. Goodbye!")
                    return
                action = actions.get(choice)
                if action is None:
                    self._print("Invalid choice. Please try again.")
                    continue
                action()
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, leaving console")
            self._print("Exiting the system. Goodbye!")
        finally:
            bus.unsubscribe(PRODUCT_EXPIRED, self._on_expired)
