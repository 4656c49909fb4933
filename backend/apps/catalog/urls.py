from django.urls import path
from .views import MyProductsView, ProductDetailView, ProductLikeView, ProductListView

urlpatterns = [
    path('', ProductListView.as_view(), name='api-products-list'),
    path('mine/', MyProductsView.as_view(), name='api-products-mine'),
    path('<int:product_id>/', ProductDetailView.as_view(), name='api-products-detail'),
    path('<int:product_id>/like/', ProductLikeView.as_view(), name='api-products-like'),
]
