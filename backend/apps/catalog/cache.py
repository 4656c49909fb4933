from __future__ import annotations

from typing import Any, Optional

from apps.common import get_logger
from .protocols import CacheBackendProtocol

logger = get_logger(__name__).bind(component="catalog", layer="cache")


class ProductListingCache:
    """
    Read-through cache for search pages.

    Keys embed a version number stored under its own key; bumping the version
    orphans every cached page at once instead of deleting them one by one.
    """

    def __init__(
        self,
        backend: CacheBackendProtocol,
        *,
        prefix: str = "products:search",
        timeout: Optional[int] = None,
    ):
        self.backend = backend
        self.prefix = prefix
        self.timeout = timeout
        self.version_key = f"{prefix}:version"
        self._default_version = 1

    def _version(self) -> int:
        return self.backend.get(self.version_key) or self._default_version

    def key_for(self, token: str) -> str:
        return f"{self.prefix}:v{self._version()}:{token}"

    def get(self, token: str) -> Any:
        return self.backend.get(self.key_for(token))

    def set(self, token: str, value: Any) -> None:
        if self.timeout is None:
            self.backend.set(self.key_for(token), value)
        else:
            self.backend.set(self.key_for(token), value, timeout=self.timeout)

    def bump(self) -> int:
        version = self._version() + 1
        # Version key should not expire
        self.backend.set(self.version_key, version, timeout=None)
        logger.debug("Bumped product listing cache version", new_version=version)
        return version
