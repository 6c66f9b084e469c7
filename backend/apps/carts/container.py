from __future__ import annotations

from functools import lru_cache

from apps.catalog.repositories import ProductRepository

from .repositories import CartProductRepository, CartRepository
from .services import CartService


@lru_cache(maxsize=None)
def build_cart_service() -> CartService:
    return CartService(
        carts=CartRepository(),
        cart_products=CartProductRepository(),
        products=ProductRepository(),
    )
