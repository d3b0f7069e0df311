"""
Implementacao do armazenamento de imagens no Cloudinary.

As credenciais sao repassadas em cada chamada do SDK em vez de usar
cloudinary.config() global. O SDK e sincrono, por isso as chamadas rodam
em thread via asyncio.to_thread.
"""
import asyncio
from typing import Any, Dict, Optional

import cloudinary.uploader

from app.domain.entities.admin import UploadedImage
from app.infrastructure.media.base import MediaStorage


class CloudinaryMediaStorage(MediaStorage):
    """Envia e remove imagens de uma pasta do Cloudinary."""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        folder: str = "cultos",
        max_size_bytes: int = 5 * 1024 * 1024,
    ):
        super().__init__(max_size_bytes=max_size_bytes)
        self.folder = folder
        self._credentials = {
            "cloud_name": cloud_name,
            "api_key": api_key,
            "api_secret": api_secret,
            "secure": True,
        }

    def is_configured(self) -> bool:
        return all(self._credentials[key] for key in ("cloud_name", "api_key", "api_secret"))

    async def _store(
        self,
        content: bytes,
        object_name: str,
        content_type: Optional[str]
    ) -> UploadedImage:
        result: Dict[str, Any] = await asyncio.to_thread(
            cloudinary.uploader.upload,
            content,
            folder=self.folder,
            public_id=object_name,
            resource_type="image",
            **self._credentials,
        )
        return UploadedImage(url=result["secure_url"], public_id=result["public_id"])

    async def _destroy(self, public_id: str) -> bool:
        result: Dict[str, Any] = await asyncio.to_thread(
            cloudinary.uploader.destroy,
            public_id,
            resource_type="image",
            invalidate=True,
            **self._credentials,
        )
        return result.get("result") == "ok"
