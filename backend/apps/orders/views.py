from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from .container import build_order_service
from .serializers import (
    CheckoutRequestSerializer,
    CheckoutResponseSerializer,
    OrderMutationResponseSerializer,
    OrderReadSerializer,
    OrderStatusUpdateSerializer,
)

logger = get_logger(__name__).bind(component="orders", layer="view")


@extend_schema(tags=["Orders"])
class CheckoutView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_order_service()
    log = logger.bind(view="CheckoutView")

    @extend_schema(
        operation_id="orders_checkout",
        summary="Checkout cart",
        description=(
            "Creates one pending order per seller from the caller's cart, marks the "
            "purchased products unavailable and empties the cart. All or nothing."
        ),
        request=CheckoutRequestSerializer,
        responses={
            201: CheckoutResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CheckoutRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        self.log.info("Checkout requested", buyer_id=request.user.id)
        result = self.service.checkout(
            request.user.id, data["shipping_address"], data["payment_method"]
        )
        return Response(
            {
                "message": "Orders created successfully",
                "orders": OrderReadSerializer(result.orders, many=True).data,
                "totalAmount": f"{result.total_amount:.2f}",
            },
            status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=["Orders"])
class MyOrdersView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_order_service()
    log = logger.bind(view="MyOrdersView")

    @extend_schema(summary="List my purchases", responses={200: OrderReadSerializer(many=True)})
    def get(self, request):
        dtos = self.service.list_by_buyer(request.user.id)
        return Response(OrderReadSerializer(dtos, many=True).data)


@extend_schema(tags=["Orders"])
class MySalesView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_order_service()
    log = logger.bind(view="MySalesView")

    @extend_schema(summary="List my sales", responses={200: OrderReadSerializer(many=True)})
    def get(self, request):
        dtos = self.service.list_by_seller(request.user.id)
        return Response(OrderReadSerializer(dtos, many=True).data)


@extend_schema(tags=["Orders"])
class OrderDetailView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_order_service()
    log = logger.bind(view="OrderDetailView")

    @extend_schema(
        summary="Get order",
        description="Visible to the order's buyer and seller only.",
        parameters=[OpenApiParameter("order_id", int, OpenApiParameter.PATH)],
        responses={
            200: OrderReadSerializer,
            403: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, order_id: int):
        dto = self.service.get_order(order_id, request.user.id)
        return Response(OrderReadSerializer(dto).data)


@extend_schema(tags=["Orders"])
class OrderStatusView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_order_service()
    log = logger.bind(view="OrderStatusView")

    @extend_schema(
        summary="Update order status",
        description="Seller only.",
        request=OrderStatusUpdateSerializer,
        responses={
            200: OrderMutationResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            403: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, order_id: int):
        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        new_status = serializer.validated_data["status"]
        self.log.info(
            "Updating order status via API", order_id=order_id, status=new_status
        )
        dto = self.service.update_status(order_id, request.user.id, new_status)
        return Response(
            {
                "message": "Order status updated successfully",
                "order": OrderReadSerializer(dto).data,
            }
        )
