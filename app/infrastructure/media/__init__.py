"""
Armazenamento remoto das imagens dos cultos.
"""
from app.infrastructure.media.base import MediaStorage, ALLOWED_IMAGE_TYPES, build_object_name
from app.infrastructure.media.cloudinary_storage import CloudinaryMediaStorage

__all__ = [
    "MediaStorage",
    "CloudinaryMediaStorage",
    "ALLOWED_IMAGE_TYPES",
    "build_object_name",
]
