"""Repository base shared by the catalog and orders apps.

Services receive repository instances instead of reaching for model managers
directly, so every query an operation performs is visible at one seam.
"""
from .exceptions import NotFound


class ModelRepository:
    model = None
    not_found_message = 'Resource not found'

    def all(self):
        return self.model.objects.all()

    def find(self, pk):
        """Return the instance with this primary key, or None."""
        return self.model.objects.filter(pk=pk).first()

    def get(self, pk):
        instance = self.find(pk)
        if instance is None:
            raise NotFound(self.not_found_message)
        return instance

    def get_for_update(self, pk):
        """Load and row-lock an instance; call inside transaction.atomic()."""
        instance = self.model.objects.select_for_update().filter(pk=pk).first()
        if instance is None:
            raise NotFound(self.not_found_message)
        return instance

    def add(self, instance):
        instance.save()
        return instance

    def save(self, instance, update_fields=None):
        if update_fields is not None:
            update_fields = list(update_fields) + ['updated_at']
        instance.save(update_fields=update_fields)
        return instance

    def delete(self, instance):
        instance.delete()


def apply_changes(instance, data, allowed_fields):
    """Copy the allow-listed keys present in data onto instance.

    Returns the names of the fields that were assigned.
    """
    changed = []
    for field in allowed_fields:
        if field in data:
            setattr(instance, field, data[field])
            changed.append(field)
    return changed
