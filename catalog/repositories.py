from restaurant_api.repositories import ModelRepository
from .models import Category, Supplier, Product


class CategoryRepository(ModelRepository):
    model = Category
    not_found_message = 'Category not found'


class SupplierRepository(ModelRepository):
    model = Supplier
    not_found_message = 'Supplier not found'


class ProductRepository(ModelRepository):
    model = Product
    not_found_message = 'Product not found'

    def all(self):
        return Product.objects.select_related('category')

    def active(self):
        return self.all().filter(is_active=True)

    def featured(self):
        return self.active().filter(is_featured=True)

    def by_category(self, category_id):
        return self.active().filter(category_id=category_id)
