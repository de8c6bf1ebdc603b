"""Remote image allow-list models and YAML loader.

Provides typed Pydantic models for the remote hosts that may serve public
images, a loader that parses the YAML config into those models, and the
helpers that apply the list to URLs and to the page Content-Security-Policy.
"""

from __future__ import annotations

import logging
from fnmatch import fnmatchcase
from pathlib import Path
from urllib.parse import urlsplit

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class RemotePattern(BaseModel):
    """One allowed remote image origin plus the path prefix it may serve."""

    protocol: str = Field(default="https", pattern=r"^https?$")
    hostname: str = Field(min_length=1)
    pathname: str = "/**"

    @property
    def origin(self) -> str:
        return f"{self.protocol}://{self.hostname}"

    def matches(self, url: str) -> bool:
        parts = urlsplit(url)
        if parts.scheme != self.protocol or parts.hostname != self.hostname:
            return False
        path = parts.path or "/"
        if self.pathname.endswith("/**"):
            prefix = self.pathname[: -len("**")]
            return path.startswith(prefix)
        return fnmatchcase(path, self.pathname)


_PUBLIC_OBJECTS = "/storage/v1/object/public/**"

_DEFAULT_PATTERNS: tuple[RemotePattern, ...] = (
    # Production
    RemotePattern(hostname="spasxtbjvsdlbhgaqivw.supabase.co", pathname=_PUBLIC_OBJECTS),
    # Staging
    RemotePattern(hostname="qxzskrykwzqgzqsihpjh.supabase.co", pathname=_PUBLIC_OBJECTS),
)


def load_remote_patterns(yaml_path: str) -> list[RemotePattern]:
    """Parse the image hosts YAML file into typed RemotePattern objects.

    Args:
        yaml_path: Path to the YAML configuration file.

    Returns:
        The configured patterns. If the file is missing, malformed or lists
        no valid entry, the built-in production and staging hosts are used.
    """
    path = Path(yaml_path)

    if not path.exists():
        logger.warning("Image hosts file not found at %s — using built-in defaults", yaml_path)
        return list(_DEFAULT_PATTERNS)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        logger.error("Failed to parse image hosts YAML at %s: %s", yaml_path, exc)
        return list(_DEFAULT_PATTERNS)

    if not isinstance(raw, dict) or not isinstance(raw.get("remote_patterns"), list):
        logger.warning("Image hosts YAML missing 'remote_patterns' list — using built-in defaults")
        return list(_DEFAULT_PATTERNS)

    patterns: list[RemotePattern] = []
    for entry in raw["remote_patterns"]:
        try:
            patterns.append(RemotePattern.model_validate(entry))
        except Exception as exc:
            logger.error("Invalid remote image pattern %r: %s — skipping", entry, exc)

    if not patterns:
        return list(_DEFAULT_PATTERNS)
    return patterns


def is_allowed_image_url(url: str, patterns: list[RemotePattern]) -> bool:
    """True if *url* is served by one of the allowed remote patterns."""
    return any(pattern.matches(url) for pattern in patterns)


def img_src_policy(patterns: list[RemotePattern]) -> str:
    """Build the CSP ``img-src`` directive for the allowed origins."""
    origins: list[str] = []
    for pattern in patterns:
        if pattern.origin not in origins:
            origins.append(pattern.origin)
    return " ".join(["img-src", "'self'", "data:", *origins])
