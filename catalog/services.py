"""Catalog services.

Deleting a category, supplier or product never removes the row: it flips
``is_active`` off. Updates are partial merges restricted to each entity's
allow-list of editable fields.
"""
import logging

from django.db import transaction

from restaurant_api.repositories import apply_changes

logger = logging.getLogger(__name__)


class SoftDeleteService:
    """CRUD over a catalog entity whose delete only deactivates it."""

    fields = ()

    def __init__(self, repository):
        self.repository = repository

    def list(self):
        return self.repository.all()

    def get(self, pk):
        return self.repository.get(pk)

    def create(self, data):
        instance = self.repository.model()
        apply_changes(instance, data, self.fields)
        return self.repository.add(instance)

    def update(self, pk, data):
        with transaction.atomic():
            instance = self.repository.get_for_update(pk)
            changed = apply_changes(instance, data, self.fields)
            return self.repository.save(instance, update_fields=changed)

    def deactivate(self, pk):
        with transaction.atomic():
            instance = self.repository.get_for_update(pk)
            instance.is_active = False
            self.repository.save(instance, update_fields=['is_active'])
        logger.info(f"Deactivated {instance._meta.verbose_name} #{instance.pk}")
        return instance


class CategoryService(SoftDeleteService):
    fields = ('name', 'description', 'is_active')


class SupplierService(SoftDeleteService):
    fields = ('name', 'email', 'phone', 'address', 'is_active')


class ProductService(SoftDeleteService):
    """Products plus their stored image.

    A replaced or removed image is only deleted once the new path is
    committed; a freshly stored upload is deleted again if the write fails.
    """

    fields = ('category', 'name', 'description', 'price', 'is_active', 'is_featured')

    def __init__(self, repository, images):
        super().__init__(repository)
        self.images = images

    def list(self):
        return self.repository.active()

    def featured(self):
        return self.repository.featured()

    def by_category(self, category_id):
        return self.repository.by_category(category_id)

    def create(self, data, image=None):
        product = self.repository.model()
        apply_changes(product, data, self.fields)
        if image is None:
            product.image_path = self.images.default_path
            return self.repository.add(product)

        product.image_path = self.images.save(image)
        try:
            return self.repository.add(product)
        except Exception:
            self.images.release(product.image_path)
            raise

    def update(self, pk, data, image=None):
        new_path = None
        try:
            with transaction.atomic():
                product = self.repository.get_for_update(pk)
                changed = apply_changes(product, data, self.fields)
                if image is not None:
                    old_path = product.image_path
                    new_path = self.images.save(image)
                    product.image_path = new_path
                    changed.append('image_path')
                    transaction.on_commit(lambda: self.images.release(old_path))
                    logger.info(f"Product #{product.pk} image {old_path} -> {new_path}")
                return self.repository.save(product, update_fields=changed)
        except Exception:
            if new_path is not None:
                self.images.release(new_path)
            raise

    def remove_image(self, pk):
        with transaction.atomic():
            product = self.repository.get_for_update(pk)
            old_path = product.image_path
            product.image_path = self.images.default_path
            self.repository.save(product, update_fields=['image_path'])
            transaction.on_commit(lambda: self.images.release(old_path))
        return product
