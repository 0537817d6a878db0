"""Factories wiring catalog services to their repositories and storage."""
from .images import ProductImageStore
from .repositories import CategoryRepository, SupplierRepository, ProductRepository
from .services import CategoryService, SupplierService, ProductService


def get_category_service():
    return CategoryService(CategoryRepository())


def get_supplier_service():
    return SupplierService(SupplierRepository())


def get_product_service():
    return ProductService(ProductRepository(), ProductImageStore())
