from __future__ import annotations

from typing import Iterable, List, Optional

from django.db import transaction

from apps.common import get_logger
from .dtos import CartDTO
from .mappers import CartMapper
from .models import Cart
from .protocols import (
    CartProductRepositoryProtocol,
    CartRepositoryProtocol,
    ProductLookupProtocol,
)

logger = get_logger(__name__).bind(component="carts", layer="service")


class CartService:
    """
    Carts of ordered product references with a stored total.

    References are not kept consistent with the catalog: a product deleted
    after being added stays referenced and simply stops counting towards
    the total on the next recalculation.
    """

    def __init__(
        self,
        carts: CartRepositoryProtocol,
        cart_products: CartProductRepositoryProtocol,
        products: ProductLookupProtocol,
    ):
        self.carts = carts
        self.cart_products = cart_products
        self.products = products
        self.logger = logger.bind(service="CartService")

    def _to_dto(self, cart: Cart) -> CartDTO:
        return CartMapper.to_dto(cart, self.cart_products.product_ids_for_cart(cart.id))

    def _missing_products(self, product_ids: Iterable[int]) -> List[int]:
        ids = list(product_ids)
        existing = self.products.price_map(ids)
        return [pid for pid in ids if pid not in existing]

    def recalculate_total(self, cart: Cart) -> Cart:
        product_ids = self.cart_products.product_ids_for_cart(cart.id)
        prices = self.products.price_map(product_ids)
        total = round(sum(prices.get(pid) or 0 for pid in product_ids), 2)
        self.logger.debug(
            "Recalculated cart total",
            cart_id=cart.id,
            items=len(product_ids),
            stale=sum(1 for pid in product_ids if pid not in prices),
            total=total,
        )
        return self.carts.update_fields(cart, total_price=total)

    def create_cart(self, product_ids: Optional[Iterable[int]] = None) -> Optional[CartDTO]:
        ids = list(product_ids or [])
        missing = self._missing_products(ids)
        if missing:
            self.logger.warning("Cart creation failed: unknown products", product_ids=missing)
            return None
        with transaction.atomic():
            cart = self.carts.create()
            for product_id in ids:
                self.cart_products.add(cart, product_id)
            self.recalculate_total(cart)
        self.logger.info("Cart created", cart_id=cart.id, items=len(ids))
        return self._to_dto(cart)

    def get_cart(self, cart_id: int) -> Optional[CartDTO]:
        cart = self.carts.get(id=cart_id)
        if not cart:
            self.logger.info("Cart not found", cart_id=cart_id)
            return None
        return self._to_dto(cart)

    def add_product(self, cart_id: int, product_id: int) -> Optional[CartDTO]:
        cart = self.carts.get(id=cart_id)
        if not cart:
            self.logger.warning("Add to cart failed: cart not found", cart_id=cart_id)
            return None
        if self._missing_products([product_id]):
            self.logger.warning(
                "Add to cart failed: product not found",
                cart_id=cart_id,
                product_id=product_id,
            )
            return None
        self.cart_products.add(cart, product_id)
        self.recalculate_total(cart)
        self.logger.info("Product added to cart", cart_id=cart_id, product_id=product_id)
        return self._to_dto(cart)

    def remove_product(self, cart_id: int, product_id: int) -> Optional[CartDTO]:
        cart = self.carts.get(id=cart_id)
        if not cart:
            self.logger.warning("Remove from cart failed: cart not found", cart_id=cart_id)
            return None
        if self.cart_products.remove_first(cart, product_id):
            self.recalculate_total(cart)
            self.logger.info("Product removed from cart", cart_id=cart_id, product_id=product_id)
        else:
            self.logger.debug(
                "Product not in cart; nothing removed",
                cart_id=cart_id,
                product_id=product_id,
            )
        return self._to_dto(cart)

    def delete_cart(self, cart_id: int) -> bool:
        cart = self.carts.get(id=cart_id)
        if not cart:
            self.logger.warning("Cart deletion failed: not found", cart_id=cart_id)
            return False
        self.carts.delete(cart)
        self.logger.info("Cart deleted", cart_id=cart_id)
        return True
