from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer, MessageResponseSerializer
from apps.common import get_logger
from .container import build_cart_service
from .serializers import (
    CartAddSerializer,
    CartMutationResponseSerializer,
    CartQuantitySerializer,
    CartReadSerializer,
    CartRemoveSerializer,
)

logger = get_logger(__name__).bind(component="carts", layer="view")


def _cart_response(message, dto):
    return Response({"message": message, "cart": CartReadSerializer(dto).data})


@extend_schema(tags=["Cart"])
class CartView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CartView")

    @extend_schema(
        summary="Get my cart",
        description="The cart is created on first access.",
        responses={200: CartReadSerializer},
    )
    def get(self, request):
        self.log.debug("Fetching cart", user_id=request.user.id)
        dto = self.service.get(request.user.id)
        return Response(CartReadSerializer(dto).data)


@extend_schema(tags=["Cart"])
class CartAddView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CartAddView")

    @extend_schema(
        summary="Add product to cart",
        description="Adding a product already in the cart increases its quantity.",
        request=CartAddSerializer,
        responses={
            200: CartMutationResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CartAddSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        dto = self.service.add(request.user.id, data["product_id"], data["quantity"])
        return _cart_response("Product added to cart successfully", dto)


@extend_schema(tags=["Cart"])
class CartUpdateView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CartUpdateView")

    @extend_schema(
        summary="Set product quantity",
        request=CartQuantitySerializer,
        responses={
            200: CartMutationResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request):
        serializer = CartQuantitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        dto = self.service.set_quantity(
            request.user.id, data["product_id"], data["quantity"]
        )
        return _cart_response("Cart updated successfully", dto)


@extend_schema(tags=["Cart"])
class CartRemoveView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CartRemoveView")

    @extend_schema(
        summary="Remove product from cart",
        description="productId may be sent in the body or as a query parameter.",
        request=CartRemoveSerializer,
        responses={
            200: CartMutationResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request):
        payload = request.data or request.query_params
        serializer = CartRemoveSerializer(data=payload)
        serializer.is_valid(raise_exception=True)
        dto = self.service.remove(request.user.id, serializer.validated_data["product_id"])
        return _cart_response("Product removed from cart successfully", dto)


@extend_schema(tags=["Cart"])
class CartClearView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CartClearView")

    @extend_schema(summary="Clear cart", responses={200: MessageResponseSerializer})
    def delete(self, request):
        self.service.clear(request.user.id)
        return Response({"message": "Cart cleared successfully"})
