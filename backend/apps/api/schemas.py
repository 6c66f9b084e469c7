from drf_spectacular.utils import inline_serializer
from rest_framework import serializers


class ErrorDetailSerializer(serializers.Serializer):
    code = serializers.CharField()
    message = serializers.CharField()
    status = serializers.IntegerField()
    details = serializers.JSONField(required=False)


class ErrorResponseSerializer(serializers.Serializer):
    status = serializers.CharField()
    message = serializers.CharField()
    error = ErrorDetailSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


def paginated_response(
    item_serializer_class: type[serializers.Serializer],
) -> type[serializers.Serializer]:
    """Inline serializer describing the catalog listing envelope around ``item_serializer_class``."""
    name = getattr(item_serializer_class, "__name__", "Items")
    return inline_serializer(
        name=f"Paginated{name}",
        fields={
            "status": serializers.CharField(),
            "payload": item_serializer_class(many=True),
            "totalPages": serializers.IntegerField(),
            "prevPage": serializers.IntegerField(allow_null=True),
            "nextPage": serializers.IntegerField(allow_null=True),
            "page": serializers.IntegerField(),
            "hasPrevPage": serializers.BooleanField(),
            "hasNextPage": serializers.BooleanField(),
            "prevLink": serializers.CharField(allow_null=True),
            "nextLink": serializers.CharField(allow_null=True),
        },
    )
