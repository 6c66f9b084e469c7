import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from apps.catalog.container import build_product_service
from apps.catalog.models import Product
from apps.catalog.serializers import ProductWriteSerializer
from apps.common import get_logger

logger = get_logger(__name__).bind(component="catalog", layer="command")

DEFAULT_PATH = Path(__file__).resolve().parents[2] / "fixtures" / "products.json"


class Command(BaseCommand):
    help = (
        "Load products from a JSON file holding an array of product objects "
        "(the flat-file catalog format). File identifiers are ignored; the "
        "database assigns new ones."
    )

    def add_arguments(self, parser):
        parser.add_argument("path", nargs="?", default=str(DEFAULT_PATH))
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Delete every existing product before loading.",
        )

    def handle(self, *args, **options):
        path = Path(options["path"])
        try:
            entries = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise CommandError(f"Product file not found: {path}") from exc
        except json.JSONDecodeError as exc:
            raise CommandError(f"Product file is not valid JSON: {exc}") from exc
        if not isinstance(entries, list):
            raise CommandError("Product file must contain a JSON array")

        service = build_product_service()
        with transaction.atomic():
            if options["flush"]:
                deleted, _ = Product.objects.all().delete()
                logger.info("Flushed products", deleted=deleted)
            created = [service.create_product(data) for data in self._coerce(entries)]

        logger.info("Loaded products", path=str(path), created=len(created))
        self.stdout.write(self.style.SUCCESS(f"Loaded {len(created)} products from {path}"))

    @staticmethod
    def _coerce(entries):
        for index, entry in enumerate(entries):
            serializer = ProductWriteSerializer(data=entry)
            if not serializer.is_valid():
                raise CommandError(f"Invalid product at index {index}: {dict(serializer.errors)}")
            yield serializer.validated_data
