from django.db import models
from django.utils import timezone

from apps.catalog.models import Product


class Cart(models.Model):
    # Use auto-incrementing PK so DB assigns IDs on insert
    id = models.AutoField(primary_key=True)
    total_price = models.FloatField(default=0)
    created_at = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return f"Cart {self.id}"


class CartProduct(models.Model):
    """One ordered product reference inside a cart."""

    cart = models.ForeignKey(
        Cart, on_delete=models.CASCADE, related_name="cart_products"
    )
    # No constraint and no cascade: deleting a product leaves a stale reference.
    product = models.ForeignKey(
        Product,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="+",
    )

    class Meta:
        db_table = "cart_products"
        ordering = ("id",)
