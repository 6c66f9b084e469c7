from typing import Dict, Iterable, List, Optional, Tuple

from django.db.models import F, Q, QuerySet

from apps.common.repository import GenericRepository
from .commands import ProductFilter
from .models import Product

SORT_ORDERING = {
    "asc": (F("price").asc(nulls_last=True), "id"),
    "desc": (F("price").desc(nulls_last=True), "id"),
}
DEFAULT_ORDERING = ("id",)


class ProductRepository(GenericRepository[Product]):
    def __init__(self):
        super().__init__(Product)

    def list_all(self) -> List[Product]:
        return list(self.model.objects.order_by(*DEFAULT_ORDERING))

    def filtered(self, filters: Optional[ProductFilter] = None) -> QuerySet:
        qs = self.model.objects.all()
        if filters is None:
            return qs
        if filters.text:
            qs = qs.filter(
                Q(title__icontains=filters.text)
                | Q(description__icontains=filters.text)
            )
        if filters.category:
            qs = qs.filter(category=filters.category)
        if filters.available:
            qs = qs.filter(stock__gt=0)
        return qs

    def query(
        self,
        filters: Optional[ProductFilter],
        sort: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[Product], int]:
        """Return one window of matching products plus the total match count."""
        qs = self.filtered(filters)
        total = qs.count()
        ordering = SORT_ORDERING.get(sort, DEFAULT_ORDERING)
        items = list(qs.order_by(*ordering)[skip : skip + limit])
        return items, total

    def price_map(self, product_ids: Iterable[int]) -> Dict[int, Optional[float]]:
        """Prices of the products that still exist among ``product_ids``."""
        ids = set(product_ids)
        if not ids:
            return {}
        return dict(self.model.objects.filter(id__in=ids).values_list("id", "price"))
