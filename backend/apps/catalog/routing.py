from django.urls import path

from .consumers import ProductsConsumer

websocket_urlpatterns = [
    path("ws/products/", ProductsConsumer.as_asgi()),
]
