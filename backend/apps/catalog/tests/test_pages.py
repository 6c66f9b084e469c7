from django.test import TestCase

from apps.catalog.models import Product


class ProductPagesTests(TestCase):
    def setUp(self):
        Product.objects.create(title="Latte", price=4.5, stock=10)
        Product.objects.create(title="Cold Brew", price=5.25, stock=0)

    def test_home_lists_every_product(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "catalog/home.html")
        self.assertContains(response, "Latte")
        self.assertContains(response, "Cold Brew")
        self.assertEqual(len(response.context["products"]), 2)

    def test_realtime_page_includes_socket_client(self):
        response = self.client.get("/realtimeproducts")
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "catalog/realtime_products.html")
        self.assertContains(response, "Latte")
        self.assertContains(response, 'data-socket-path="/ws/products/"')
        self.assertContains(response, "/js/realtime_products.js")

    def test_home_without_products(self):
        Product.objects.all().delete()
        response = self.client.get("/")
        self.assertContains(response, "No hay productos disponibles.")

    def test_public_assets_served_from_root(self):
        response = self.client.get("/js/realtime_products.js")
        self.assertEqual(response.status_code, 200)
        self.assertIn(b"productoCreado", b"".join(response.streaming_content))
