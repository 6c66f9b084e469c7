from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Protocol

from .models import Cart, CartProduct


class CartRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional[Cart]:
        ...

    def create(self, **data) -> Cart:
        ...

    def update_fields(self, cart: Cart, **fields) -> Cart:
        ...

    def delete(self, cart: Cart) -> None:
        ...


class CartProductRepositoryProtocol(Protocol):
    def add(self, cart: Cart, product_id: int) -> CartProduct:
        ...

    def product_ids_for_cart(self, cart_id: int) -> List[int]:
        ...

    def remove_first(self, cart: Cart, product_id: int) -> bool:
        ...


class ProductLookupProtocol(Protocol):
    def price_map(self, product_ids: Iterable[int]) -> Dict[int, Optional[float]]:
        ...
