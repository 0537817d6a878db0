from rest_framework import generics, status
from rest_framework.decorators import api_view
from rest_framework.parsers import JSONParser, FormParser, MultiPartParser
from rest_framework import filters
from drf_yasg.utils import swagger_auto_schema

from restaurant_api.responses import api_response
from . import providers
from .serializers import (
    CategorySerializer, SupplierSerializer, ProductSerializer, ProductWriteSerializer
)


class CatalogListCreateView(generics.GenericAPIView):
    """
    get: List every record
    post: Create a record
    """
    entity = None
    filter_backends = [filters.SearchFilter]
    search_fields = ['name']

    def get_service(self):
        raise NotImplementedError

    def get_queryset(self):
        return self.get_service().list()

    def list_response(self, data):
        return api_response(data)

    def get(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return self.list_response(serializer.data)

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        instance = self.get_service().create(serializer.validated_data)
        return api_response(
            self.get_serializer(instance).data,
            message=f'{self.entity} created successfully',
            status_code=status.HTTP_201_CREATED
        )


class CatalogDetailView(generics.GenericAPIView):
    """
    get: Retrieve a record
    put/patch: Update the fields supplied in the request
    delete: Deactivate the record (it is kept and stays retrievable)
    """
    entity = None
    show_message = None

    def get_service(self):
        raise NotImplementedError

    def get(self, request, pk):
        instance = self.get_service().get(pk)
        return api_response(self.get_serializer(instance).data, message=self.show_message)

    def put(self, request, pk):
        service = self.get_service()
        service.get(pk)
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        instance = service.update(pk, serializer.validated_data)
        return api_response(self.get_serializer(instance).data, message=f'{self.entity} updated successfully')

    def patch(self, request, pk):
        return self.put(request, pk)

    def delete(self, request, pk):
        self.get_service().deactivate(pk)
        return api_response(message=f'{self.entity} deactivated successfully')


# Category Views
class CategoryListCreateView(CatalogListCreateView):
    entity = 'Category'
    serializer_class = CategorySerializer
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    ordering_fields = ['name', 'created_at']

    def get_service(self):
        return providers.get_category_service()

    def list_response(self, data):
        return api_response(data, message='Categories retrieved successfully', status=status.HTTP_200_OK)


class CategoryDetailView(CatalogDetailView):
    entity = 'Category'
    show_message = 'Category retrieved successfully'
    serializer_class = CategorySerializer

    def get_service(self):
        return providers.get_category_service()


# Supplier Views
class SupplierListCreateView(CatalogListCreateView):
    entity = 'Supplier'
    serializer_class = SupplierSerializer
    search_fields = ['name', 'email', 'phone']

    def get_service(self):
        return providers.get_supplier_service()


class SupplierDetailView(CatalogDetailView):
    entity = 'Supplier'
    serializer_class = SupplierSerializer

    def get_service(self):
        return providers.get_supplier_service()


# Product Views
class ProductListCreateView(generics.GenericAPIView):
    """
    get: List active products, filterable by category and featured flag
    post: Create a product, optionally with an image upload
    """
    serializer_class = ProductSerializer
    parser_classes = [JSONParser, FormParser, MultiPartParser]
    filterset_fields = ['category', 'is_featured']

    @swagger_auto_schema(request_body=ProductWriteSerializer, responses={201: ProductSerializer})
    def post(self, request, *args, **kwargs):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        image = data.pop('image', None)
        product = providers.get_product_service().create(data, image=image)
        return api_response(
            ProductSerializer(product, context={'request': request}).data,
            message='Product created successfully',
            status_code=status.HTTP_201_CREATED
        )

    def get_queryset(self):
        return providers.get_product_service().list()

    def get(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        return api_response(self.get_serializer(queryset, many=True).data)


class ProductDetailView(generics.GenericAPIView):
    """
    get: Product details
    put/patch: Update the fields supplied; a new image replaces the stored one
    delete: Deactivate the product
    """
    serializer_class = ProductSerializer
    parser_classes = [JSONParser, FormParser, MultiPartParser]

    def get(self, request, pk):
        product = providers.get_product_service().get(pk)
        return api_response(self.get_serializer(product).data)

    @swagger_auto_schema(request_body=ProductWriteSerializer, responses={200: ProductSerializer})
    def put(self, request, pk):
        service = providers.get_product_service()
        service.get(pk)
        serializer = ProductWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        image = data.pop('image', None)
        product = service.update(pk, data, image=image)
        return api_response(self.get_serializer(product).data, message='Product updated successfully')

    @swagger_auto_schema(request_body=ProductWriteSerializer, responses={200: ProductSerializer})
    def patch(self, request, pk):
        return self.put(request, pk)

    def delete(self, request, pk):
        providers.get_product_service().deactivate(pk)
        return api_response(message='Product deactivated successfully')


@api_view(['PATCH'])
def remove_product_image(request, pk):
    """Drop the product's uploaded image and fall back to the default image"""
    product = providers.get_product_service().remove_image(pk)
    return api_response(
        ProductSerializer(product, context={'request': request}).data,
        message='Product image removed successfully'
    )


@api_view(['GET'])
def featured_products(request):
    """Active products flagged as featured"""
    products = providers.get_product_service().featured()
    return api_response(ProductSerializer(products, many=True, context={'request': request}).data)


@api_view(['GET'])
def products_by_category(request, category_id):
    """Active products of one category"""
    products = providers.get_product_service().by_category(category_id)
    return api_response(ProductSerializer(products, many=True, context={'request': request}).data)
