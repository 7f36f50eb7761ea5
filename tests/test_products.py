from datetime import date, timedelta

from ezelectronics.db import product_functions
from ezelectronics.db.models import CategoryEnum
from ezelectronics.errors import (
    DateError,
    EmptyProductStockError,
    GroupingError,
    LowProductStockError,
    ProductAlreadyExistsError,
    ProductNotFoundError,
)
from tests.base import DatabaseTestCase


class ProductFunctionsTestCase(DatabaseTestCase):
    async def test_new_model_defaults_arrival_date_to_today(self):
        await product_functions.new_model(self.db, "iPhone13", CategoryEnum.smartphone, 5, None, 799.0, None)
        product = await product_functions.get_product_by_model(self.db, "iPhone13")
        self.assertEqual(product.arrival_date, date.today())
        self.assertEqual(product.quantity, 5)

    async def test_new_model_rejects_future_date_and_duplicates(self):
        with self.assertRaises(DateError):
            await product_functions.new_model(
                self.db, "future", CategoryEnum.laptop, 1, None, 10.0, date.today() + timedelta(days=1)
            )
        await self.make_product("dup")
        with self.assertRaises(ProductAlreadyExistsError):
            await self.make_product("dup")

    async def test_update_model_adds_quantity(self):
        await self.make_product(quantity=3)
        new_quantity = await product_functions.update_model(self.db, "testmodel", 7, date(2024, 2, 1))
        self.assertEqual(new_quantity, 10)

    async def test_update_model_date_checks(self):
        await self.make_product(arrival=date(2024, 1, 10))
        with self.assertRaises(DateError):
            await product_functions.update_model(self.db, "testmodel", 1, date(2024, 1, 9))
        with self.assertRaises(DateError):
            await product_functions.update_model(self.db, "testmodel", 1, date.today() + timedelta(days=3))
        with self.assertRaises(ProductNotFoundError):
            await product_functions.update_model(self.db, "missing", 1, None)

    async def test_sell_model(self):
        await self.make_product(quantity=4)
        remaining = await product_functions.sell_model(self.db, "testmodel", 3, None)
        self.assertEqual(remaining, 1)

        with self.assertRaises(LowProductStockError):
            await product_functions.sell_model(self.db, "testmodel", 2, None)
        await product_functions.sell_model(self.db, "testmodel", 1, None)
        with self.assertRaises(EmptyProductStockError):
            await product_functions.sell_model(self.db, "testmodel", 1, None)

    async def test_sell_model_date_checks(self):
        await self.make_product(arrival=date(2024, 1, 10))
        with self.assertRaises(DateError):
            await product_functions.sell_model(self.db, "testmodel", 1, date(2023, 12, 31))
        with self.assertRaises(DateError):
            await product_functions.sell_model(self.db, "testmodel", 1, date.today() + timedelta(days=1))

    async def test_get_products_filters(self):
        await self.make_product("phone", category=CategoryEnum.smartphone)
        await self.make_product("laptop", category=CategoryEnum.laptop, quantity=0)

        everything = await product_functions.get_products(self.db, None, None, None)
        self.assertEqual([p.model for p in everything], ["laptop", "phone"])

        laptops = await product_functions.get_products(self.db, "category", "Laptop", None)
        self.assertEqual([p.model for p in laptops], ["laptop"])

        by_model = await product_functions.get_products(self.db, "model", None, "phone")
        self.assertEqual([p.model for p in by_model], ["phone"])

        available = await product_functions.get_products(self.db, None, None, None, available_only=True)
        self.assertEqual([p.model for p in available], ["phone"])

        with self.assertRaises(ProductNotFoundError):
            await product_functions.get_products(self.db, "model", None, "missing")

    async def test_get_products_grouping_mismatch(self):
        bad_combinations = [
            ("category", None, None),
            ("category", "Laptop", "phone"),
            ("model", None, None),
            ("model", "Laptop", "phone"),
            (None, "Laptop", None),
            (None, None, "phone"),
        ]
        for grouping, category, model in bad_combinations:
            with self.subTest(grouping=grouping, category=category, model=model):
                with self.assertRaises(GroupingError):
                    await product_functions.get_products(self.db, grouping, category, model)

    async def test_delete_product(self):
        await self.make_product("a")
        await self.make_product("b")
        await product_functions.delete_product(self.db, "a")
        with self.assertRaises(ProductNotFoundError):
            await product_functions.delete_product(self.db, "a")

        await product_functions.delete_all_products(self.db)
        self.assertEqual(await product_functions.get_products(self.db, None, None, None), [])
