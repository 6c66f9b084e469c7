from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from django.db import DatabaseError
from rest_framework import status

from apps.api.exceptions import ApplicationError
from apps.common import get_logger
from .commands import ProductCreateCommand, ProductListQuery, ProductUpdateCommand
from .dtos import ProductDTO, ProductPageDTO
from .mappers import ProductMapper
from .pagination import ProductListPagination
from .protocols import ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")

LIST_FAILURE_MESSAGE = "An error occurred while fetching products"


class ProductService:
    def __init__(
        self,
        products: ProductRepositoryProtocol,
        pagination: Optional[ProductListPagination] = None,
    ):
        self.products = products
        self.pagination = pagination or ProductListPagination()
        self.logger = logger.bind(service="ProductService")

    def list_all_products(self) -> List[ProductDTO]:
        self.logger.debug("Listing all products")
        return ProductMapper.many_to_dto(self.products.list_all())

    def list_products_page(
        self,
        params: Optional[Mapping[str, Any]],
        path: str,
    ) -> ProductPageDTO:
        """
        Filter, sort and paginate the catalog from raw query parameters.

        ``path`` is the request path including its query string; page links
        reuse it with ``page`` (and an explicit ``limit``) substituted.
        Malformed ``page``/``limit`` raise ``ApplicationError`` (400); store
        failures raise ``ApplicationError`` (500) with a generic message.
        """
        query = ProductListQuery.from_params(params)
        self.logger.debug(
            "Listing products page",
            page=query.page,
            limit=query.limit,
            sort=query.sort,
            text=query.text,
            category=query.category,
            available=query.available,
        )
        try:
            items, total = self.products.query(
                query.filters, query.sort, query.skip, query.limit
            )
        except DatabaseError as exc:
            self.logger.exception("Product listing failed", error=str(exc))
            raise ApplicationError(
                "SERVER_ERROR",
                LIST_FAILURE_MESSAGE,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            ) from exc
        info = self.pagination.page_info(query.page, query.limit, total)
        return ProductPageDTO(
            items=ProductMapper.many_to_dto(items),
            page=info.page,
            limit=info.limit,
            total=info.total,
            total_pages=info.total_pages,
            prev_page=info.prev_page,
            next_page=info.next_page,
            has_prev_page=info.has_prev_page,
            has_next_page=info.has_next_page,
            prev_link=self.pagination.get_link(path, info.prev_page, info.limit),
            next_link=self.pagination.get_link(path, info.next_page, info.limit),
        )

    def get_product(self, product_id: int) -> Optional[ProductDTO]:
        self.logger.debug("Fetching product", product_id=product_id)
        product = self.products.get(id=product_id)
        if not product:
            self.logger.info("Product not found", product_id=product_id)
            return None
        return ProductMapper.to_dto(product)

    def create_product(
        self, data: Union[Mapping[str, Any], ProductCreateCommand]
    ) -> ProductDTO:
        cmd = (
            data
            if isinstance(data, ProductCreateCommand)
            else ProductCreateCommand.from_raw(data)
        )
        self.logger.info("Creating product", title=cmd.title, code=cmd.code)
        product = self.products.create(**cmd.to_fields())
        self.logger.info("Product created", product_id=product.id)
        return ProductMapper.to_dto(product)

    def update_product(
        self,
        product_id: int,
        data: Union[Mapping[str, Any], ProductUpdateCommand],
    ) -> Optional[ProductDTO]:
        cmd = (
            data
            if isinstance(data, ProductUpdateCommand)
            else ProductUpdateCommand.from_raw(product_id, data)
        )
        changes: Dict[str, Any] = cmd.changes()
        self.logger.info(
            "Updating product", product_id=product_id, fields=sorted(changes)
        )
        product = self.products.get(id=product_id)
        if not product:
            self.logger.warning("Product update failed: not found", product_id=product_id)
            return None
        self.products.update_fields(product, **changes)
        self.logger.info("Product updated", product_id=product_id)
        return ProductMapper.to_dto(product)

    def delete_product(self, product_id: int) -> bool:
        self.logger.info("Deleting product", product_id=product_id)
        product = self.products.get(id=product_id)
        if not product:
            self.logger.warning("Product deletion failed: not found", product_id=product_id)
            return False
        self.products.delete(product)
        self.logger.info("Product deleted", product_id=product_id)
        return True
