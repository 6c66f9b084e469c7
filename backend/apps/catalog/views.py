from typing import Optional

from django.shortcuts import render
from django.views import View
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import (
    ErrorResponseSerializer,
    MessageResponseSerializer,
    paginated_response,
)
from apps.api.utils import error_response
from apps.common import get_logger
from .container import build_product_broadcaster, build_product_service
from .protocols import ProductBroadcasterProtocol
from .serializers import (
    ProductPageSerializer,
    ProductReadSerializer,
    ProductWriteSerializer,
)

logger = get_logger(__name__).bind(component="catalog", layer="view")


def _not_found(product_id) -> Response:
    return error_response("NOT_FOUND", "Product not found", {"id": str(product_id)})


def _parse_product_id(raw) -> Optional[int]:
    """Identifiers come from the path as text; anything that is not a whole number matches no product."""
    text = str(raw).strip()
    return int(text) if text.isdecimal() else None


@extend_schema(tags=["Catalog"])
class ProductListView(APIView):
    service = build_product_service()
    broadcaster: ProductBroadcasterProtocol = build_product_broadcaster()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        description=(
            "Filter with ?query (title/description, case-insensitive), ?category "
            "and ?availability; sort by price with ?sort=asc|desc; paginate with "
            "?page and ?limit (default 10)."
        ),
        parameters=[
            OpenApiParameter("limit", int, required=False),
            OpenApiParameter("page", int, required=False),
            OpenApiParameter("sort", str, required=False, enum=["asc", "desc"]),
            OpenApiParameter("query", str, required=False),
            OpenApiParameter("category", str, required=False),
            OpenApiParameter("availability", bool, required=False),
        ],
        responses={
            200: paginated_response(ProductReadSerializer),
            400: OpenApiResponse(response=ErrorResponseSerializer),
            500: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        self.log.debug("Handling product list request", params=dict(request.query_params))
        page = self.service.list_products_page(
            request.query_params, request.get_full_path()
        )
        return Response(ProductPageSerializer(page).data)

    @extend_schema(
        summary="Create product",
        request=ProductWriteSerializer,
        responses={
            200: ProductReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info(
            "Creating product via API", title=serializer.validated_data.get("title")
        )
        dto = self.service.create_product(serializer.validated_data)
        out = ProductReadSerializer(dto).data
        self.broadcaster.product_created(out)
        self.log.info("Product created via API", product_id=dto.id)
        return Response(out, status=status.HTTP_200_OK)


@extend_schema(tags=["Catalog"])
class ProductDetailView(APIView):
    service = build_product_service()
    broadcaster: ProductBroadcasterProtocol = build_product_broadcaster()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        responses={
            200: ProductReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, product_id):
        raw_id, product_id = product_id, _parse_product_id(product_id)
        if product_id is None:
            return _not_found(raw_id)
        self.log.debug("Fetching product detail", product_id=product_id)
        dto = self.service.get_product(product_id)
        if not dto:
            return _not_found(product_id)
        return Response(ProductReadSerializer(dto).data)

    @extend_schema(
        summary="Update product",
        description="Partial update: fields missing from the body are left unchanged.",
        request=ProductWriteSerializer,
        responses={
            200: MessageResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, product_id):
        raw_id, product_id = product_id, _parse_product_id(product_id)
        if product_id is None:
            return _not_found(raw_id)
        serializer = ProductWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        self.log.info("Updating product via API", product_id=product_id)
        dto = self.service.update_product(product_id, serializer.validated_data)
        if not dto:
            self.log.warning("Product update failed: not found", product_id=product_id)
            return _not_found(product_id)
        self.broadcaster.product_updated(product_id)
        return Response({"message": "Product updated successfully"})

    @extend_schema(
        summary="Delete product",
        responses={
            200: MessageResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, product_id):
        raw_id, product_id = product_id, _parse_product_id(product_id)
        if product_id is None:
            return _not_found(raw_id)
        self.log.info("Deleting product via API", product_id=product_id)
        if not self.service.delete_product(product_id):
            return _not_found(product_id)
        self.broadcaster.product_deleted(product_id)
        return Response({"message": "Product deleted successfully"})


class ProductPageView(View):
    """Server-rendered page whose only template input is the full product list."""

    template_name = ""
    service = build_product_service()

    def get(self, request):
        products = self.service.list_all_products()
        logger.debug("Rendering product page", template=self.template_name, count=len(products))
        return render(request, self.template_name, {"products": products})


class HomeView(ProductPageView):
    template_name = "catalog/home.html"


class RealTimeProductsView(ProductPageView):
    template_name = "catalog/realtime_products.html"


home = HomeView.as_view()
realtime_products = RealTimeProductsView.as_view()
