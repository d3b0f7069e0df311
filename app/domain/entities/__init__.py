"""
Entidades do dominio.
"""
from app.domain.entities.admin import AdminIdentity, UploadedImage

__all__ = [
    "AdminIdentity",
    "UploadedImage",
]
