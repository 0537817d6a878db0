from decimal import Decimal

from django.contrib.auth import get_user_model
from rest_framework import serializers

from catalog.models import Product
from .models import Order, OrderItem

MONEY = dict(max_digits=10, decimal_places=2, min_value=Decimal('0'))


class OrderUserSerializer(serializers.ModelSerializer):
    full_name = serializers.SerializerMethodField()

    class Meta:
        model = get_user_model()
        fields = ['id', 'email', 'full_name']

    def get_full_name(self, obj):
        return f"{obj.first_name} {obj.last_name}".strip()


class OrderReadSerializer(serializers.ModelSerializer):
    user = OrderUserSerializer(read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'order_number', 'user_id', 'user', 'table', 'order_type',
            'status', 'subtotal', 'tax', 'discount', 'total', 'notes',
            'created_at', 'updated_at'
        ]


class OrderWriteSerializer(serializers.Serializer):
    """Order create/update input. order_number is generated, never accepted."""
    user_id = serializers.PrimaryKeyRelatedField(queryset=get_user_model().objects.all(), source='user')
    table = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    order_type = serializers.ChoiceField(choices=Order.OrderType.choices)
    status = serializers.ChoiceField(choices=Order.Status.choices, required=False)
    subtotal = serializers.DecimalField(**MONEY)
    tax = serializers.DecimalField(**MONEY)
    discount = serializers.DecimalField(required=False, **MONEY)
    total = serializers.DecimalField(**MONEY)
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Order.Status.choices)


class ProductSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = ['id', 'name', 'price', 'image_path']


class OrderItemReadSerializer(serializers.ModelSerializer):
    product = ProductSummarySerializer(read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            'id', 'order_id', 'product_id', 'product', 'quantity',
            'unit_price', 'subtotal', 'notes', 'created_at', 'updated_at'
        ]


class OrderItemCreateSerializer(serializers.Serializer):
    """unit_price and subtotal are derived from the product, not accepted from clients."""
    order_id = serializers.PrimaryKeyRelatedField(queryset=Order.objects.all(), source='order')
    product_id = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all(), source='product')
    quantity = serializers.IntegerField(min_value=1)
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class OrderItemUpdateSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1, required=False)
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class OrderItemQuantitySerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1)


class BulkItemSerializer(serializers.Serializer):
    # Existence is checked when the item is added; unknown products are skipped
    product_id = serializers.IntegerField()
    quantity = serializers.IntegerField(min_value=1)
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class BulkOrderItemSerializer(serializers.Serializer):
    order_id = serializers.PrimaryKeyRelatedField(queryset=Order.objects.all(), source='order')
    items = BulkItemSerializer(many=True, allow_empty=False)
