from django.urls import path
from . import views

urlpatterns = [
    # Orders
    path('orders/', views.OrderListCreateView.as_view(), name='order-list-create'),
    path('orders/status/<str:status>/', views.orders_by_status, name='order-by-status'),
    path('orders/<int:pk>/', views.OrderDetailView.as_view(), name='order-detail'),
    path('orders/<int:pk>/status/', views.update_order_status, name='order-update-status'),
    path('orders/<int:pk>/cancel/', views.cancel_order, name='order-cancel'),

    # Order Items Management
    path('order-items/', views.OrderItemListCreateView.as_view(), name='order-item-list-create'),
    path('order-items/bulk/', views.bulk_add_items, name='order-item-bulk-add'),
    path('order-items/order/<int:order_id>/', views.items_by_order, name='order-item-by-order'),
    path('order-items/<int:pk>/', views.OrderItemDetailView.as_view(), name='order-item-detail'),
    path('order-items/<int:pk>/quantity/', views.update_item_quantity, name='order-item-quantity'),
]
