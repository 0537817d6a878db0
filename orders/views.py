from rest_framework import generics, status
from rest_framework.decorators import api_view
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from restaurant_api.responses import api_response
from . import providers
from .serializers import (
    OrderReadSerializer, OrderWriteSerializer, OrderStatusSerializer,
    OrderItemReadSerializer, OrderItemCreateSerializer, OrderItemUpdateSerializer,
    OrderItemQuantitySerializer, BulkOrderItemSerializer
)


class OrderListCreateView(generics.GenericAPIView):
    """
    get: List orders, filterable by status, order type and user
    post: Create an order; the order number is generated
    """
    serializer_class = OrderReadSerializer
    filterset_fields = ['status', 'order_type', 'user']

    def get_queryset(self):
        return providers.get_order_service().list()

    def get(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        return api_response(self.get_serializer(queryset, many=True).data)

    @swagger_auto_schema(
        operation_description="Create a new order",
        request_body=OrderWriteSerializer,
        responses={201: OrderReadSerializer, 422: 'Validation Error'}
    )
    def post(self, request, *args, **kwargs):
        serializer = OrderWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = providers.get_order_service().create(serializer.validated_data)
        return api_response(
            self.get_serializer(order).data,
            message='Order created successfully',
            status_code=status.HTTP_201_CREATED
        )


class OrderDetailView(generics.GenericAPIView):
    """
    get: Retrieve an order
    put/patch: Update the fields supplied in the request
    """
    serializer_class = OrderReadSerializer

    def get(self, request, pk):
        order = providers.get_order_service().get(pk)
        return api_response(self.get_serializer(order).data)

    @swagger_auto_schema(request_body=OrderWriteSerializer, responses={200: OrderReadSerializer})
    def put(self, request, pk):
        service = providers.get_order_service()
        service.get(pk)
        serializer = OrderWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        order = service.update(pk, serializer.validated_data)
        return api_response(self.get_serializer(order).data, message='Order updated successfully')

    @swagger_auto_schema(request_body=OrderWriteSerializer, responses={200: OrderReadSerializer})
    def patch(self, request, pk):
        return self.put(request, pk)


@swagger_auto_schema(
    method='patch',
    operation_description="Set the order status (any known status is accepted)",
    request_body=OrderStatusSerializer,
    responses={200: OrderReadSerializer, 404: 'Order not found', 422: 'Validation Error'}
)
@api_view(['PATCH'])
def update_order_status(request, pk):
    service = providers.get_order_service()
    service.get(pk)
    serializer = OrderStatusSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    order = service.set_status(pk, serializer.validated_data['status'])
    return api_response(OrderReadSerializer(order).data, message='Order status updated successfully')


@swagger_auto_schema(
    method='patch',
    operation_description="Cancel an order; completed orders cannot be cancelled",
    responses={200: OrderReadSerializer, 400: 'Completed orders cannot be cancelled', 404: 'Order not found'}
)
@api_view(['PATCH'])
def cancel_order(request, pk):
    order = providers.get_order_service().cancel(pk)
    return api_response(OrderReadSerializer(order).data, message='Order cancelled successfully')


@swagger_auto_schema(
    method='get',
    manual_parameters=[
        openapi.Parameter('status', openapi.IN_PATH, description="Order status", type=openapi.TYPE_STRING),
    ],
    responses={200: OrderReadSerializer(many=True), 422: 'Invalid status parameter'}
)
@api_view(['GET'])
def orders_by_status(request, status):
    orders = providers.get_order_service().by_status(status)
    return api_response(OrderReadSerializer(orders, many=True).data)


# Order Items Management
class OrderItemListCreateView(generics.GenericAPIView):
    """
    get: List every order item
    post: Add an item to an open order at the product's current price
    """
    serializer_class = OrderItemReadSerializer
    filterset_fields = ['order', 'product']

    def get_queryset(self):
        return providers.get_order_item_service().list()

    def get(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        return api_response(self.get_serializer(queryset, many=True).data)

    @swagger_auto_schema(
        request_body=OrderItemCreateSerializer,
        responses={201: OrderItemReadSerializer, 400: 'Order is closed', 422: 'Validation Error'}
    )
    def post(self, request, *args, **kwargs):
        serializer = OrderItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        item = providers.get_order_item_service().create(
            order_id=data['order'].pk,
            product_id=data['product'].pk,
            quantity=data['quantity'],
            notes=data.get('notes'),
        )
        return api_response(
            self.get_serializer(item).data,
            message='Order item created successfully',
            status_code=status.HTTP_201_CREATED
        )


class OrderItemDetailView(generics.GenericAPIView):
    """
    get: Retrieve an order item
    put/patch: Update quantity and notes of an item on an open order
    delete: Remove an item from an open order
    """
    serializer_class = OrderItemReadSerializer

    def get(self, request, pk):
        item = providers.get_order_item_service().get(pk)
        return api_response(self.get_serializer(item).data)

    @swagger_auto_schema(request_body=OrderItemUpdateSerializer, responses={200: OrderItemReadSerializer})
    def put(self, request, pk):
        service = providers.get_order_item_service()
        service.get(pk)
        serializer = OrderItemUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        item = service.update(pk, serializer.validated_data)
        return api_response(self.get_serializer(item).data, message='Order item updated successfully')

    @swagger_auto_schema(request_body=OrderItemUpdateSerializer, responses={200: OrderItemReadSerializer})
    def patch(self, request, pk):
        return self.put(request, pk)

    def delete(self, request, pk):
        providers.get_order_item_service().delete(pk)
        return api_response(message='Order item deleted successfully')


@api_view(['GET'])
def items_by_order(request, order_id):
    """Items of a single order"""
    items = providers.get_order_item_service().by_order(order_id)
    return api_response(OrderItemReadSerializer(items, many=True).data)


@swagger_auto_schema(
    method='patch',
    request_body=OrderItemQuantitySerializer,
    responses={200: OrderItemReadSerializer, 400: 'Order is closed', 404: 'Order item not found'}
)
@api_view(['PATCH'])
def update_item_quantity(request, pk):
    service = providers.get_order_item_service()
    service.get(pk)
    serializer = OrderItemQuantitySerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    item = service.update_quantity(pk, serializer.validated_data['quantity'])
    return api_response(OrderItemReadSerializer(item).data, message='Order item quantity updated successfully')


@swagger_auto_schema(
    method='post',
    operation_description="Add several items to an order; unknown products are skipped",
    request_body=BulkOrderItemSerializer,
    responses={201: OrderItemReadSerializer(many=True), 400: 'Order is closed', 422: 'Validation Error'}
)
@api_view(['POST'])
def bulk_add_items(request):
    serializer = BulkOrderItemSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    items = providers.get_order_item_service().bulk_add(data['order'].pk, data['items'])
    return api_response(
        OrderItemReadSerializer(items, many=True).data,
        message='Order items added successfully',
        status_code=status.HTTP_201_CREATED
    )
