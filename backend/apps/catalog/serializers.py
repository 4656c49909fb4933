from rest_framework import serializers

from apps.users.serializers import PublicUserSerializer

from .commands import SORT_FIELDS
from .models import Product
from .pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


class LocationSerializer(serializers.Serializer):
    city = serializers.CharField(required=False, allow_blank=True, max_length=100)
    state = serializers.CharField(required=False, allow_blank=True, max_length=100)
    pincode = serializers.CharField(required=False, allow_blank=True, max_length=20)


class ProductReadSerializer(serializers.Serializer):
    # Matches ProductDTO; wire names are camelCase
    id = serializers.IntegerField()
    title = serializers.CharField()
    description = serializers.CharField()
    category = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    images = serializers.ListField(child=serializers.CharField())
    condition = serializers.CharField()
    seller = PublicUserSerializer(allow_null=True)
    isAvailable = serializers.BooleanField(source="is_available")
    location = serializers.DictField()
    tags = serializers.ListField(child=serializers.CharField())
    views = serializers.IntegerField()
    likesCount = serializers.IntegerField(source="likes_count")
    createdAt = serializers.DateTimeField(source="created_at", allow_null=True)
    updatedAt = serializers.DateTimeField(source="updated_at", allow_null=True)


class PaginationSerializer(serializers.Serializer):
    currentPage = serializers.IntegerField()
    totalPages = serializers.IntegerField()
    totalProducts = serializers.IntegerField()
    hasNext = serializers.BooleanField()
    hasPrev = serializers.BooleanField()


class ProductPageSerializer(serializers.Serializer):
    products = ProductReadSerializer(many=True)
    pagination = PaginationSerializer()


class ProductSearchQuerySerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True, max_length=200)
    category = serializers.ChoiceField(choices=Product.Category.choices, required=False)
    minPrice = serializers.DecimalField(
        source="min_price", max_digits=10, decimal_places=2, min_value=0, required=False
    )
    maxPrice = serializers.DecimalField(
        source="max_price", max_digits=10, decimal_places=2, min_value=0, required=False
    )
    sortBy = serializers.ChoiceField(
        source="sort_by", choices=sorted(SORT_FIELDS), default="createdAt"
    )
    sortOrder = serializers.ChoiceField(
        source="sort_order", choices=["asc", "desc"], default="desc"
    )
    page = serializers.IntegerField(min_value=1, default=1)
    limit = serializers.IntegerField(
        min_value=1, max_value=MAX_PAGE_SIZE, default=DEFAULT_PAGE_SIZE
    )

    def validate(self, attrs):
        low, high = attrs.get("min_price"), attrs.get("max_price")
        if low is not None and high is not None and low > high:
            raise serializers.ValidationError(
                {"minPrice": "minPrice must not exceed maxPrice."}
            )
        return attrs


class ProductWriteSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=100)
    description = serializers.CharField(max_length=1000)
    category = serializers.ChoiceField(choices=Product.Category.choices)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    images = serializers.ListField(
        child=serializers.CharField(max_length=500), required=False
    )
    condition = serializers.ChoiceField(choices=Product.Condition.choices)
    location = LocationSerializer(required=False)
    tags = serializers.ListField(
        child=serializers.CharField(max_length=50), required=False
    )


class ProductUpdateSerializer(ProductWriteSerializer):
    # Always used with partial=True
    isAvailable = serializers.BooleanField(source="is_available", required=False)


class ProductMutationResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    product = ProductReadSerializer()


class LikeStateSerializer(serializers.Serializer):
    message = serializers.CharField()
    isLiked = serializers.BooleanField(source="is_liked")
    likesCount = serializers.IntegerField(source="likes_count")
