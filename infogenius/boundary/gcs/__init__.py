"""Google Cloud Storage backup adapters."""

from infogenius.boundary.gcs.gcs_uploader import GCSImageUploader
from infogenius.boundary.gcs.storage_config import (
    build_storage_sources,
    resolve_storage_config,
)

__all__ = ["GCSImageUploader", "build_storage_sources", "resolve_storage_config"]
