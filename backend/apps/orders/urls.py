from django.urls import path
from .views import (
    CheckoutView,
    MyOrdersView,
    MySalesView,
    OrderDetailView,
    OrderStatusView,
)

urlpatterns = [
    path('', CheckoutView.as_view(), name='api-orders-checkout'),
    path('create/', CheckoutView.as_view(), name='api-orders-create'),
    path('my-orders/', MyOrdersView.as_view(), name='api-orders-mine'),
    path('my-sales/', MySalesView.as_view(), name='api-orders-sales'),
    path('<int:order_id>/', OrderDetailView.as_view(), name='api-orders-detail'),
    path('<int:order_id>/status/', OrderStatusView.as_view(), name='api-orders-status'),
]
