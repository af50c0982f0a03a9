"""
Delivery configuration loaded from the environment.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from responsive_srcset.url import DeliveryUrl


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class DeliveryConfig(BaseModel):
    """CDN account and delivery settings."""
    cloud_name: str
    secure: bool = True
    resource_type: str = "image"
    delivery_type: str = "upload"

    @classmethod
    def from_env(cls, cloud_name: Optional[str] = None) -> "DeliveryConfig":
        """
        Load configuration from environment variables (and a .env file).

        Args:
            cloud_name: Overrides SRCSET_CLOUD_NAME when given.

        Returns:
            DeliveryConfig instance.
        """
        load_dotenv()

        cloud_name = cloud_name or os.getenv("SRCSET_CLOUD_NAME")
        if not cloud_name:
            raise ValueError("SRCSET_CLOUD_NAME environment variable not set")

        return cls(
            cloud_name=cloud_name,
            secure=_env_flag("SRCSET_SECURE", "true"),
            resource_type=os.getenv("SRCSET_RESOURCE_TYPE", "image"),
            delivery_type=os.getenv("SRCSET_DELIVERY_TYPE", "upload"),
        )

    def to_url(self, transformation: Optional[str] = None) -> DeliveryUrl:
        """Build a delivery URL builder for this configuration."""
        return DeliveryUrl(
            cloud_name=self.cloud_name,
            resource_type=self.resource_type,
            delivery_type=self.delivery_type,
            secure=self.secure,
            transformation=transformation or None,
        )
