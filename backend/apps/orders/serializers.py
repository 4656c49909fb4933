from rest_framework import serializers

from apps.users.serializers import PublicUserSerializer

from .models import Order


class ShippingAddressSerializer(serializers.Serializer):
    street = serializers.CharField(required=False, allow_blank=True, max_length=200)
    city = serializers.CharField(required=False, allow_blank=True, max_length=100)
    state = serializers.CharField(required=False, allow_blank=True, max_length=100)
    pincode = serializers.CharField(required=False, allow_blank=True, max_length=20)
    country = serializers.CharField(required=False, allow_blank=True, max_length=100)


class CheckoutRequestSerializer(serializers.Serializer):
    shippingAddress = ShippingAddressSerializer(source="shipping_address")
    paymentMethod = serializers.ChoiceField(
        source="payment_method",
        choices=Order.PaymentMethod.choices,
        default=Order.PaymentMethod.CASH_ON_DELIVERY,
    )


class OrderStatusUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Order.Status.choices)


class OrderLineSerializer(serializers.Serializer):
    productId = serializers.IntegerField(source="product_id", allow_null=True)
    title = serializers.CharField()
    quantity = serializers.IntegerField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2)


class OrderReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    buyer = PublicUserSerializer()
    seller = PublicUserSerializer()
    products = OrderLineSerializer(source="lines", many=True)
    totalAmount = serializers.DecimalField(
        source="total_amount", max_digits=12, decimal_places=2
    )
    status = serializers.CharField()
    shippingAddress = serializers.DictField(source="shipping_address")
    paymentMethod = serializers.CharField(source="payment_method")
    paymentStatus = serializers.CharField(source="payment_status")
    createdAt = serializers.DateTimeField(source="created_at", allow_null=True)
    updatedAt = serializers.DateTimeField(source="updated_at", allow_null=True)


class CheckoutResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    orders = OrderReadSerializer(many=True)
    totalAmount = serializers.DecimalField(max_digits=12, decimal_places=2)


class OrderMutationResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    order = OrderReadSerializer()
