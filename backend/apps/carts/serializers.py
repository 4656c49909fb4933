from rest_framework import serializers


class CartProductSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    condition = serializers.CharField()
    sellerId = serializers.IntegerField(source="seller_id")
    isAvailable = serializers.BooleanField(source="is_available")
    images = serializers.ListField(child=serializers.CharField())


class CartItemSerializer(serializers.Serializer):
    product = CartProductSerializer()
    quantity = serializers.IntegerField()
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2)


class CartReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    userId = serializers.IntegerField(source="user_id")
    items = CartItemSerializer(many=True)
    totalItems = serializers.IntegerField(source="total_items")
    totalAmount = serializers.DecimalField(
        source="total_amount", max_digits=12, decimal_places=2
    )


class CartAddSerializer(serializers.Serializer):
    productId = serializers.IntegerField(source="product_id", min_value=1)
    quantity = serializers.IntegerField(min_value=1, default=1)


class CartQuantitySerializer(serializers.Serializer):
    # Zero or negative quantities remove the entry
    productId = serializers.IntegerField(source="product_id", min_value=1)
    quantity = serializers.IntegerField()


class CartRemoveSerializer(serializers.Serializer):
    productId = serializers.IntegerField(source="product_id", min_value=1)


class CartMutationResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    cart = CartReadSerializer()
