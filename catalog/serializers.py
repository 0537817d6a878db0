from decimal import Decimal

from django.conf import settings
from django.core.validators import FileExtensionValidator
from rest_framework import serializers
from rest_framework.fields import empty

from .images import ProductImageStore
from .models import Category, Supplier, Product


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ['id', 'name', 'description', 'is_active', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']


class SupplierSerializer(serializers.ModelSerializer):
    class Meta:
        model = Supplier
        fields = ['id', 'name', 'email', 'phone', 'address', 'is_active', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']


class CategorySummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ['id', 'name']


class ProductSerializer(serializers.ModelSerializer):
    category = CategorySummarySerializer(read_only=True)
    image_url = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id', 'category_id', 'category', 'name', 'description', 'price',
            'image_path', 'image_url', 'is_active', 'is_featured',
            'created_at', 'updated_at'
        ]

    def get_image_url(self, obj):
        url = ProductImageStore().url(obj.image_path)
        request = self.context.get('request')
        if request is not None:
            return request.build_absolute_uri(url)
        return url


class OptionalBooleanField(serializers.BooleanField):
    # multipart forms omit unchecked flags; treat a missing key as absent, not False
    default_empty_html = empty


class ProductWriteSerializer(serializers.Serializer):
    """Validates product create/update input; image arrives as a multipart file."""
    category_id = serializers.PrimaryKeyRelatedField(queryset=Category.objects.all(), source='category')
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0'))
    image = serializers.FileField(
        required=False,
        allow_null=True,
        validators=[FileExtensionValidator(allowed_extensions=settings.PRODUCT_IMAGE_EXTENSIONS)]
    )
    is_active = OptionalBooleanField(required=False)
    is_featured = OptionalBooleanField(required=False)

    def validate_image(self, value):
        if value is not None and value.size > settings.PRODUCT_IMAGE_MAX_SIZE:
            limit_kb = settings.PRODUCT_IMAGE_MAX_SIZE // 1024
            raise serializers.ValidationError(f"The image may not be greater than {limit_kb} kilobytes.")
        return value
