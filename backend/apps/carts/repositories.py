from typing import List

from apps.common.repository import GenericRepository
from .models import Cart, CartProduct


class CartRepository(GenericRepository[Cart]):
    def __init__(self):
        super().__init__(Cart)


class CartProductRepository(GenericRepository[CartProduct]):
    def __init__(self):
        super().__init__(CartProduct)

    def add(self, cart: Cart, product_id: int) -> CartProduct:
        return self.model.objects.create(cart=cart, product_id=product_id)

    def product_ids_for_cart(self, cart_id: int) -> List[int]:
        return list(
            self.model.objects.filter(cart_id=cart_id)
            .order_by("id")
            .values_list("product_id", flat=True)
        )

    def remove_first(self, cart: Cart, product_id: int) -> bool:
        item = (
            self.model.objects.filter(cart=cart, product_id=product_id)
            .order_by("id")
            .first()
        )
        if item is None:
            return False
        item.delete()
        return True
