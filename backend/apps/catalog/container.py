from __future__ import annotations

from functools import lru_cache

from .broadcast import ProductBroadcaster
from .repositories import ProductRepository
from .services import ProductService


# One store handle and one broadcaster per process, shared by every view.
@lru_cache(maxsize=None)
def build_product_service() -> ProductService:
    return ProductService(products=ProductRepository())


@lru_cache(maxsize=None)
def build_product_broadcaster() -> ProductBroadcaster:
    return ProductBroadcaster()
