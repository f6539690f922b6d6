from datetime import date, datetime
import unittest
from stockroom.domain.Product import Product, parse_expiry_date
from stockroom.domain.errors import InvalidDateError


class TestProduct(unittest.TestCase):

    def setUp(self):
        self.rice = Product(1, "Rice", 50.0, 10, "01-01-2099")

    def test_parses_expiry_text(self):
        self.assertEqual(self.rice.expiry_date, date(2099, 1, 1))

    def test_accepts_date_objects(self):
        product = Product(2, "Milk", 30.0, 5, datetime(2030, 5, 17, 13, 45))
        self.assertEqual(product.expiry_date, date(2030, 5, 17))

    def test_invalid_date_text(self):
        for text in ("2099-01-01", "31-02-2099", "tomorrow", ""):
            with self.assertRaises(InvalidDateError):
                Product(3, "Bread", 25.0, 1, text)

    def test_invalid_date_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_expiry_date("1/1/2099")

    def test_parse_ignores_surrounding_whitespace(self):
        self.assertEqual(parse_expiry_date(" 05-06-2031\n"), date(2031, 6, 5))

    def test_is_expired_strictly_after(self):
        expiry = date(2024, 3, 10)
        product = Product(4, "Yogurt", 20.0, 3, expiry)
        self.assertFalse(product.is_expired(date(2024, 3, 9)))
        self.assertFalse(product.is_expired(expiry))
        self.assertTrue(product.is_expired(date(2024, 3, 11)))
        self.assertTrue(product.is_expired(datetime(2024, 3, 11, 0, 1)))

    def test_is_expired_defaults_to_now(self):
        self.assertFalse(self.rice.is_expired())
        self.assertTrue(Product(5, "Old", 1.0, 1, "01-01-2000").is_expired())

    def test_quantity_setter(self):
        self.rice.quantity = 4
        self.assertEqual(self.rice.quantity, 4)
        with self.assertRaises(ValueError):
            self.rice.quantity = -1
        self.assertEqual(self.rice.quantity, 4)

    def test_other_fields_are_read_only(self):
        with self.assertRaises(AttributeError):
            self.rice.name = "Flour"
        with self.assertRaises(AttributeError):
            self.rice.price = 1.0

    def test_rejects_negative_values(self):
        with self.assertRaises(ValueError):
            Product(6, "Salt", -1.0, 1, "01-01-2099")
        with self.assertRaises(ValueError):
            Product(6, "Salt", 1.0, -1, "01-01-2099")

    def test_display(self):
        self.assertEqual(
            self.rice.display(),
            "ID: 1 | Name: Rice | Price: RS. 50.0 | Quantity: 10 | Expiry Date: 01-01-2099",
        )
        self.assertEqual(str(self.rice), self.rice.display())

    def test_dict_conversion(self):
        data = self.rice.to_dict()
        self.assertEqual(data, {
            "id": 1, "name": "Rice", "price": 50.0, "quantity": 10, "expiry_date": "01-01-2099"
        })

    def test_is_expired_from_start_of_expiry_day(self):
        milk = Product(7, "Milk", 1.0, 1, "15-06-2025")
        self.assertFalse(milk.is_expired(date(2025, 6, 15)))
        self.assertFalse(milk.is_expired(datetime(2025, 6, 15, 0, 0)))
        self.assertTrue(milk.is_expired(datetime(2025, 6, 15, 12, 0)))

    def test_rejects_non_finite_price(self):
        for price in (float("inf"), float("-inf"), float("nan")):
            with self.assertRaises(ValueError):
                Product(8, "Salt", price, 1, "01-01-2099")
