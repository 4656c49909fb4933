from django.urls import path, include

urlpatterns = [
    path("auth/", include("apps.auth.urls")),
    path("products/", include("apps.catalog.urls")),
    path("cart/", include("apps.carts.urls")),
    path("orders/", include("apps.orders.urls")),
]
