from drf_spectacular.utils import extend_schema
from rest_framework.exceptions import NotFound
from rest_framework.views import APIView


@extend_schema(exclude=True)
class UnknownEndpointView(APIView):
    """Answers every unmatched path under ``api/`` with the JSON error envelope."""

    def handle(self, request, *args, **kwargs):
        raise NotFound("Endpoint not found")

    get = post = put = patch = delete = handle
