from django.urls import path, include, re_path
from django.conf import settings
from django.views.static import serve
from apps.catalog.views import home, realtime_products
from apps.common.views import live_health, ready_health
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)

urlpatterns = [
    path("", home, name="home"),
    path("api/", include("apps.api.urls")),
    path("realtimeproducts", realtime_products, name="realtime-products"),
    path("health/live", live_health, name="health-live"),
    path("health/ready", ready_health, name="health-ready"),
]

if settings.DEBUG:
    urlpatterns += [
        path("schema/", SpectacularAPIView.as_view(), name="schema"),
        path(
            "docs/swagger/",
            SpectacularSwaggerView.as_view(url_name="schema"),
            name="swagger-ui",
        ),
        path(
            "docs/redoc/",
            SpectacularRedocView.as_view(url_name="schema"),
            name="redoc",
        ),
    ]

# Public assets are mounted last so they never shadow an API route.
urlpatterns += [
    re_path(
        r"^(?P<path>.+)$",
        serve,
        {"document_root": settings.PUBLIC_DIR},
        name="public-assets",
    ),
]
