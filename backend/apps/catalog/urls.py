from django.urls import path
from .views import ProductListView, ProductDetailView

urlpatterns = [
    path('products', ProductListView.as_view(), name='api-products-list'),
    # Non-numeric ids still reach the view so they get the JSON not-found body
    path('products/<str:product_id>', ProductDetailView.as_view(), name='api-products-detail'),
]
