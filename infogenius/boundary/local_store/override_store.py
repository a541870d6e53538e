"""
Storage override store.

Manual bucket/token overrides that take precedence over environment values.

Dependencies: key_value_store
System role: Manual layer of the storage configuration
"""

import logging

from infogenius.boundary.local_store.key_value_store import LocalKeyValueStore

logger = logging.getLogger(__name__)

BUCKET_OVERRIDE_KEY = "gcs_bucket_override"
TOKEN_OVERRIDE_KEY = "gcs_token_override"


class OverrideStore:
    """Reads and writes the two override keys."""

    def __init__(self, store: LocalKeyValueStore) -> None:
        self._store = store

    def get_bucket(self) -> str | None:
        return self._store.get_item(BUCKET_OVERRIDE_KEY) or None

    def get_token(self) -> str | None:
        return self._store.get_item(TOKEN_OVERRIDE_KEY) or None

    def set_overrides(self, bucket: str | None = None, token: str | None = None) -> None:
        """
        Store overrides. A blank value removes that override.

        Args:
            bucket: Bucket override
            token: Access token override
        """
        for key, value in ((BUCKET_OVERRIDE_KEY, bucket), (TOKEN_OVERRIDE_KEY, token)):
            if value and value.strip():
                self._store.set_item(key, value.strip())
            else:
                self._store.remove_item(key)
        logger.info(
            f"{__name__}:set_overrides - bucket_set={bool(self.get_bucket())}, "
            f"token_set={bool(self.get_token())}"
        )

    def clear(self) -> None:
        self._store.remove_item(BUCKET_OVERRIDE_KEY)
        self._store.remove_item(TOKEN_OVERRIDE_KEY)
        logger.info(f"{__name__}:clear - Storage overrides removed")
