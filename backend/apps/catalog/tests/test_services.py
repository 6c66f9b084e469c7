import unittest

from django.db import OperationalError

from apps.api.exceptions import ApplicationError
from apps.catalog.services import ProductService


class StubProduct:
    def __init__(self, product_id: int, **fields):
        self.id = product_id
        self.title = fields.get("title")
        self.description = fields.get("description")
        self.price = fields.get("price")
        self.stock = fields.get("stock")
        self.category = fields.get("category")
        self.thumbnails = fields.get("thumbnails") or []
        self.code = fields.get("code")


class FakeProductRepository:
    def __init__(self):
        self._products = {}
        self._pk = 1
        self.last_query = None

    def create(self, **data):
        product = StubProduct(self._pk, **data)
        self._products[self._pk] = product
        self._pk += 1
        return product

    def get(self, **filters):
        return self._products.get(filters.get("id"))

    def list_all(self):
        return list(self._products.values())

    def update_fields(self, product, **fields):
        for key, value in fields.items():
            setattr(product, key, value)
        return product

    def delete(self, product):
        self._products.pop(product.id, None)

    def query(self, filters, sort, skip, limit):
        self.last_query = (filters, sort, skip, limit)
        items = list(self._products.values())
        if filters.text:
            needle = filters.text.lower()
            items = [
                p
                for p in items
                if needle in (p.title or "").lower()
                or needle in (p.description or "").lower()
            ]
        if filters.category:
            items = [p for p in items if p.category == filters.category]
        if filters.available:
            items = [p for p in items if (p.stock or 0) > 0]
        if sort:
            items.sort(key=lambda p: p.price or 0, reverse=sort == "desc")
        return items[skip : skip + limit], len(items)


class BrokenProductRepository(FakeProductRepository):
    def query(self, filters, sort, skip, limit):
        raise OperationalError("connection refused")


class ProductServiceTests(unittest.TestCase):
    def setUp(self):
        self.repo = FakeProductRepository()
        self.service = ProductService(products=self.repo)

    def seed(self):
        for title, price, stock, category in (
            ("Café Colombia", 12.5, 25, "granos"),
            ("Espresso Blend", 14.0, 40, "granos"),
            ("Latte", 4.5, 10, "bebidas"),
            ("Cold Brew", 5.25, 0, "bebidas"),
            ("Prensa francesa", 32.0, 6, "accesorios"),
        ):
            self.service.create_product(
                {"title": title, "price": price, "stock": stock, "category": category}
            )

    def test_create_then_get_returns_same_fields_plus_id(self):
        payload = {"title": "Latte", "price": 4.5, "stock": 10}
        created = self.service.create_product(payload)
        fetched = self.service.get_product(created.id)
        self.assertEqual(created.id, 1)
        self.assertEqual(fetched, created)
        for key, value in payload.items():
            self.assertEqual(getattr(fetched, key), value)
        self.assertIsNone(fetched.description)

    def test_get_missing_returns_none(self):
        self.assertIsNone(self.service.get_product(42))

    def test_update_merges_fields(self):
        created = self.service.create_product(
            {"title": "Latte", "price": 4.5, "stock": 10, "category": "bebidas"}
        )
        updated = self.service.update_product(created.id, {"price": 5.0})
        self.assertEqual(updated.price, 5.0)
        self.assertEqual(updated.title, "Latte")
        self.assertEqual(updated.stock, 10)
        self.assertEqual(updated.category, "bebidas")
        self.assertEqual(updated.id, created.id)

    def test_update_ignores_identifier_in_body(self):
        created = self.service.create_product({"title": "Latte"})
        updated = self.service.update_product(created.id, {"id": 99, "title": "Mocha"})
        self.assertEqual(updated.id, created.id)
        self.assertIsNone(self.service.get_product(99))

    def test_update_missing_returns_none(self):
        self.assertIsNone(self.service.update_product(7, {"title": "x"}))

    def test_delete_then_list_excludes_product(self):
        self.seed()
        self.assertTrue(self.service.delete_product(3))
        titles = [p.title for p in self.service.list_all_products()]
        self.assertNotIn("Latte", titles)
        self.assertEqual(len(titles), 4)

    def test_delete_missing_returns_false(self):
        self.assertFalse(self.service.delete_product(3))

    def test_page_sorted_desc_first_page(self):
        self.seed()
        page = self.service.list_products_page(
            {"sort": "desc", "limit": "2", "page": "1"},
            "/api/products?sort=desc&limit=2&page=1",
        )
        self.assertEqual([p.price for p in page.items], [32.0, 14.0])
        self.assertEqual(page.total_pages, 3)
        self.assertTrue(page.has_next_page)
        self.assertFalse(page.has_prev_page)
        self.assertEqual(page.next_page, 2)
        self.assertIsNone(page.prev_page)
        self.assertIsNone(page.prev_link)
        self.assertIn("page=2", page.next_link)
        self.assertIn("sort=desc", page.next_link)

    def test_page_passes_skip_and_limit_to_store(self):
        self.seed()
        self.service.list_products_page({"limit": "2", "page": "3"}, "/api/products")
        filters, sort, skip, limit = self.repo.last_query
        self.assertEqual((sort, skip, limit), (None, 4, 2))

    def test_page_text_filter_is_case_insensitive(self):
        self.seed()
        page = self.service.list_products_page({"query": "CAFÉ"}, "/api/products")
        self.assertEqual([p.title for p in page.items], ["Café Colombia"])

    def test_page_category_and_availability(self):
        self.seed()
        page = self.service.list_products_page(
            {"category": "bebidas", "availability": "true"}, "/api/products"
        )
        self.assertEqual([p.title for p in page.items], ["Latte"])
        self.assertEqual(page.total, 1)
        self.assertEqual(page.total_pages, 1)
        self.assertIsNone(page.next_link)

    def test_page_beyond_last_is_empty(self):
        self.seed()
        page = self.service.list_products_page({"page": "9"}, "/api/products?page=9")
        self.assertEqual(page.items, [])
        self.assertTrue(page.has_prev_page)
        self.assertFalse(page.has_next_page)
        self.assertEqual(page.prev_page, 8)

    def test_empty_catalog(self):
        page = self.service.list_products_page({}, "/api/products")
        self.assertEqual(page.total_pages, 0)
        self.assertFalse(page.has_next_page)
        self.assertEqual(page.page, 1)

    def test_malformed_limit_raises_validation_error(self):
        with self.assertRaises(ApplicationError) as ctx:
            self.service.list_products_page({"limit": "0"}, "/api/products?limit=0")
        self.assertEqual(ctx.exception.code, "VALIDATION_ERROR")
        self.assertIsNone(self.repo.last_query)

    def test_store_failure_raises_server_error(self):
        service = ProductService(products=BrokenProductRepository())
        with self.assertRaises(ApplicationError) as ctx:
            service.list_products_page({}, "/api/products")
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(ctx.exception.message, "An error occurred while fetching products")
