"""Product image storage.

Images live in a Django storage backend (the filesystem under MEDIA_ROOT by
default). Products always point at some path: when nothing was uploaded they
point at the shared default image, which is never deleted.
"""
import logging
import time

from django.conf import settings
from django.core.files.storage import default_storage

from .models import Product

logger = logging.getLogger(__name__)


class ProductImageStore:

    def __init__(self, storage=None, directory=None, default_path=None):
        self.storage = storage or default_storage
        self.directory = directory or settings.PRODUCT_IMAGE_DIR
        self.default_path = default_path or settings.PRODUCT_DEFAULT_IMAGE
        self.max_length = Product._meta.get_field('image_path').max_length

    def is_default(self, path):
        return not path or path == self.default_path

    def save(self, upload):
        """Store an uploaded file and return its storage path."""
        name = f"{self.directory}/{int(time.time())}_{upload.name}"
        # Truncated to fit Product.image_path
        path = self.storage.save(name, upload, max_length=self.max_length)
        logger.info(f"Stored product image {path}")
        return path

    def release(self, path):
        """Delete a stored image unless it is the shared default."""
        if self.is_default(path):
            return
        if self.storage.exists(path):
            self.storage.delete(path)
            logger.info(f"Released product image {path}")

    def url(self, path):
        return self.storage.url(path or self.default_path)
