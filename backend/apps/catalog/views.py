from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer, MessageResponseSerializer
from apps.common import get_logger
from .container import build_product_service
from .serializers import (
    LikeStateSerializer,
    ProductMutationResponseSerializer,
    ProductPageSerializer,
    ProductReadSerializer,
    ProductSearchQuerySerializer,
    ProductUpdateSerializer,
    ProductWriteSerializer,
)

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Products"])
class ProductListView(APIView):
    permission_classes = [IsAuthenticatedOrReadOnly]
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_search",
        summary="Search available products",
        description="Filters, sorting and offset pagination. Cached results may be served.",
        parameters=[ProductSearchQuerySerializer],
        responses={
            200: ProductPageSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        query = ProductSearchQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        self.log.debug("Handling product search", **query.validated_data)
        page = self.service.search(query.validated_data)
        return Response(ProductPageSerializer(page).data)

    @extend_schema(
        summary="Create product",
        request=ProductWriteSerializer,
        responses={
            201: ProductMutationResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info(
            "Creating product via API",
            seller_id=request.user.id,
            title=serializer.validated_data.get("title"),
        )
        dto = self.service.create_product(request.user.id, serializer.validated_data)
        return Response(
            {
                "message": "Product created successfully",
                "product": ProductReadSerializer(dto).data,
            },
            status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=["Products"])
class MyProductsView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_product_service()
    log = logger.bind(view="MyProductsView")

    @extend_schema(
        summary="List my products",
        responses={200: ProductReadSerializer(many=True)},
    )
    def get(self, request):
        self.log.debug("Listing own products", seller_id=request.user.id)
        dtos = self.service.list_for_seller(request.user.id)
        return Response(ProductReadSerializer(dtos, many=True).data)


@extend_schema(tags=["Products"])
class ProductDetailView(APIView):
    permission_classes = [IsAuthenticatedOrReadOnly]
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product",
        description="Each fetch increments the product's view counter.",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        responses={
            200: ProductReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, product_id: int):
        self.log.debug("Fetching product detail", product_id=product_id)
        dto = self.service.get_product(product_id)
        return Response(ProductReadSerializer(dto).data)

    @extend_schema(
        summary="Update product",
        description="Only the seller may update; omitted fields are left untouched.",
        request=ProductUpdateSerializer,
        responses={
            200: ProductMutationResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            403: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, product_id: int):
        serializer = ProductUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        self.log.info("Updating product", product_id=product_id, actor_id=request.user.id)
        dto = self.service.update_product(
            product_id, request.user.id, serializer.validated_data
        )
        return Response(
            {
                "message": "Product updated successfully",
                "product": ProductReadSerializer(dto).data,
            }
        )

    @extend_schema(
        summary="Delete product",
        responses={
            200: MessageResponseSerializer,
            403: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, product_id: int):
        self.log.info("Deleting product", product_id=product_id, actor_id=request.user.id)
        self.service.delete_product(product_id, request.user.id)
        return Response({"message": "Product deleted successfully"})


@extend_schema(tags=["Products"])
class ProductLikeView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_product_service()
    log = logger.bind(view="ProductLikeView")

    @extend_schema(
        summary="Like or unlike product",
        request=None,
        responses={
            200: LikeStateSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request, product_id: int):
        state = self.service.toggle_like(product_id, request.user.id)
        message = "Product liked" if state.is_liked else "Product unliked"
        return Response(
            {"message": message, "isLiked": state.is_liked, "likesCount": state.likes_count}
        )
