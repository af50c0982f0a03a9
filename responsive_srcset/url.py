"""
Delivery URL builder for the image-transformation CDN.
"""

from typing import Optional, Protocol
from urllib.parse import quote

from pydantic import BaseModel

CDN_HOST = "res.cloudinary.com"


class UrlBuilder(Protocol):
    """Collaborator contract consumed by the srcset generator."""

    def duplicate(self) -> "UrlBuilder":
        ...

    def current_transformation_text(self) -> str:
        ...

    def with_transformation(self, raw: str) -> "UrlBuilder":
        ...

    def render(self, source: str) -> str:
        ...


class DeliveryUrl(BaseModel):
    """Immutable description of a CDN delivery URL."""
    cloud_name: str
    resource_type: str = "image"
    delivery_type: str = "upload"
    secure: bool = True
    transformation: Optional[str] = None

    class Config:
        frozen = True

    def duplicate(self) -> "DeliveryUrl":
        return self.model_copy(deep=True)

    def current_transformation_text(self) -> str:
        """Raw transformation text, or an empty string when none is set."""
        return self.transformation or ""

    def with_transformation(self, raw: Optional[str]) -> "DeliveryUrl":
        """Return a copy carrying `raw` as its transformation."""
        return self.model_copy(update={"transformation": raw or None})

    def render(self, source: str) -> str:
        """
        Render the final URL for a source image.

        Args:
            source: Public identifier of the image on the CDN.

        Returns:
            Absolute delivery URL.
        """
        if not self.cloud_name or not self.cloud_name.strip():
            raise ValueError("cloud_name is required to render a delivery URL")

        scheme = "https" if self.secure else "http"
        parts = [
            f"{scheme}://{CDN_HOST}",
            self.cloud_name,
            self.resource_type,
            self.delivery_type,
        ]
        if self.transformation:
            parts.append(self.transformation.strip("/"))
        parts.append(quote(source.lstrip("/"), safe="/:"))

        return "/".join(parts)
