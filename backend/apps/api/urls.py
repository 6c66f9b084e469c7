from django.urls import include, path, re_path

from .views import UnknownEndpointView

urlpatterns = [
    path("", include("apps.catalog.urls")),
    # Must stay last: keeps the public-assets catch-all from answering API paths with HTML
    re_path(r"^.*$", UnknownEndpointView.as_view(), name="api-not-found"),
]
