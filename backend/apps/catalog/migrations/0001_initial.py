from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.AutoField(primary_key=True, serialize=False)),
                ("title", models.CharField(blank=True, max_length=255, null=True)),
                ("description", models.TextField(blank=True, null=True)),
                ("price", models.FloatField(blank=True, null=True)),
                ("stock", models.IntegerField(blank=True, null=True)),
                ("category", models.CharField(blank=True, max_length=100, null=True)),
                ("thumbnails", models.JSONField(blank=True, default=list)),
                ("code", models.CharField(blank=True, max_length=100, null=True)),
            ],
            options={
                "indexes": [
                    models.Index(fields=["category"], name="product_category_idx"),
                    models.Index(fields=["price"], name="product_price_idx"),
                ],
            },
        ),
    ]
