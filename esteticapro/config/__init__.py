"""Configuration module — settings and the remote image allow-list."""

from esteticapro.config.image_hosts import (
    RemotePattern,
    img_src_policy,
    is_allowed_image_url,
    load_remote_patterns,
)
from esteticapro.config.settings import HubSettings

__all__ = [
    "HubSettings",
    "RemotePattern",
    "img_src_policy",
    "is_allowed_image_url",
    "load_remote_patterns",
]
