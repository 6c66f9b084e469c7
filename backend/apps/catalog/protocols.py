from __future__ import annotations

from typing import (
    Any,
    Dict,
    Iterable,
    List,
    Optional,
    Protocol,
    Tuple,
    TYPE_CHECKING,
    runtime_checkable,
)

from .models import Product

if TYPE_CHECKING:
    from .commands import ProductFilter


class ProductRepositoryProtocol(Protocol):
    def list_all(self) -> Iterable[Product]:
        ...

    def get(self, **filters) -> Optional[Product]:
        ...

    def create(self, **data) -> Product:
        ...

    def update_fields(self, product: Product, **fields) -> Product:
        ...

    def delete(self, product: Product) -> None:
        ...

    def query(
        self,
        filters: "ProductFilter",
        sort: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[Product], int]:
        ...


@runtime_checkable
class ProductBroadcasterProtocol(Protocol):
    def product_created(self, record: Dict[str, Any]) -> bool:
        ...

    def product_updated(self, product_id: int) -> bool:
        ...

    def product_deleted(self, product_id: int) -> bool:
        ...
