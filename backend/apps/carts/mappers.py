from typing import Iterable, List

from .dtos import CartDTO
from .models import Cart


class CartMapper:
    @staticmethod
    def to_dto(cart: Cart, product_ids: Iterable[int]) -> CartDTO:
        return CartDTO(
            id=cart.id,
            total_price=cart.total_price,
            created_at=cart.created_at,
            products=list(product_ids),
        )
