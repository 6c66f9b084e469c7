from django.db import models


class Product(models.Model):
    # Every attribute is optional: absent input fields are stored as NULL.
    id = models.AutoField(primary_key=True)
    title = models.CharField(max_length=255, null=True, blank=True)
    description = models.TextField(null=True, blank=True)
    price = models.FloatField(null=True, blank=True)
    stock = models.IntegerField(null=True, blank=True)
    category = models.CharField(max_length=100, null=True, blank=True)
    thumbnails = models.JSONField(default=list, blank=True)
    code = models.CharField(max_length=100, null=True, blank=True)

    def __str__(self):
        return self.title or f"Product {self.pk}"

    class Meta:
        indexes = [
            models.Index(fields=["category"], name="product_category_idx"),
            models.Index(fields=["price"], name="product_price_idx"),
        ]
