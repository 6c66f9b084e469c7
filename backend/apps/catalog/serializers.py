from dataclasses import asdict, is_dataclass

from rest_framework import serializers

from .dtos import ProductPageDTO


class ProductReadSerializer(serializers.Serializer):
    # Matches ProductDTO shapes used for responses
    id = serializers.IntegerField()
    title = serializers.CharField(allow_null=True)
    description = serializers.CharField(allow_null=True)
    price = serializers.FloatField(allow_null=True)
    stock = serializers.IntegerField(allow_null=True)
    category = serializers.CharField(allow_null=True)
    thumbnails = serializers.ListField(child=serializers.CharField())
    code = serializers.CharField(allow_null=True)

    def to_representation(self, instance):
        if instance is None:
            return None
        if is_dataclass(instance):
            return asdict(instance)
        return super().to_representation(instance)


class ProductWriteSerializer(serializers.Serializer):
    """
    Type coercion for product input. Nothing is required; absent fields are
    left out of ``validated_data`` so creates store them as null and updates
    leave them untouched.
    """

    title = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=255
    )
    description = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    price = serializers.FloatField(required=False, allow_null=True, min_value=0)
    stock = serializers.IntegerField(required=False, allow_null=True, min_value=0)
    category = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=100
    )
    thumbnails = serializers.ListField(
        child=serializers.CharField(), required=False, allow_null=True
    )
    code = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=100
    )


class ProductPageSerializer(serializers.Serializer):
    """Renders a ``ProductPageDTO`` as the listing envelope."""

    def to_representation(self, instance: ProductPageDTO):
        return {
            "status": "success",
            "payload": ProductReadSerializer(instance.items, many=True).data,
            "totalPages": instance.total_pages,
            "prevPage": instance.prev_page,
            "nextPage": instance.next_page,
            "page": instance.page,
            "hasPrevPage": instance.has_prev_page,
            "hasNextPage": instance.has_next_page,
            "prevLink": instance.prev_link,
            "nextLink": instance.next_link,
        }
