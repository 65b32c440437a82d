"""
Synthesizer: Publishes staged assets and records where they will live.

The synthesizer doesn't upload anything itself. It decides the destination
(bucket and object key) of every asset, hands that location back to the
resources that reference it, and writes an asset manifest next to the
template for the deployment tooling to act on.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from stratus.config.settings import SynthesisSettings
from stratus.core.tokens import Reference, Sub

logger = logging.getLogger(__name__)


class FileAssetPackaging(str, Enum):
    """How a file asset is packaged before upload."""

    ZIP_DIRECTORY = "zip"
    FILE = "file"


@dataclass(frozen=True)
class FileAssetSource:
    """A staged file or directory to be published."""

    file_name: str
    """Path of the staged asset, relative to the stack's output directory"""

    source_hash: str
    """Content hash of the asset"""

    packaging: FileAssetPackaging = FileAssetPackaging.FILE
    """Packaging applied before upload"""


@dataclass(frozen=True)
class FileAssetLocation:
    """Where a published file asset will be found at deploy time."""

    bucket_name: Reference
    """Bucket holding the asset (resolved at deploy time)"""

    object_key: str
    """Object key of the asset within the bucket"""


class DefaultSynthesizer:
    """
    Publishes file assets to a single bootstrap bucket.

    Assets are keyed by content hash, so registering the same source twice
    returns the same location and produces a single manifest entry.

    Example:
        location = synthesizer.add_file_asset(
            file_name="asset.3f7a...",
            source_hash="3f7a...",
            packaging=FileAssetPackaging.ZIP_DIRECTORY,
        )
        location.object_key  # "3f7a....zip"
    """

    def __init__(self, settings: SynthesisSettings | None = None):
        self.settings = settings or SynthesisSettings()
        self._assets: dict[str, tuple[FileAssetSource, FileAssetLocation]] = {}

    @property
    def bucket_name(self) -> Sub:
        template = self.settings.file_assets_bucket_name.replace(
            "${Qualifier}", self.settings.qualifier
        )
        return Sub(template)

    def add_file_asset(
        self,
        file_name: str,
        source_hash: str,
        packaging: FileAssetPackaging = FileAssetPackaging.FILE,
    ) -> FileAssetLocation:
        """
        Register a staged asset for publishing.

        Args:
            file_name: Staged path of the asset, relative to the stack outdir
            source_hash: Content hash of the asset
            packaging: How to package the asset before upload

        Returns:
            Location of the asset at deploy time
        """
        existing = self._assets.get(source_hash)
        if existing is not None:
            return existing[1]

        if packaging == FileAssetPackaging.ZIP_DIRECTORY:
            extension = ".zip"
        else:
            extension = Path(file_name).suffix

        source = FileAssetSource(
            file_name=file_name,
            source_hash=source_hash,
            packaging=packaging,
        )
        location = FileAssetLocation(
            bucket_name=self.bucket_name,
            object_key=f"{source_hash}{extension}",
        )
        self._assets[source_hash] = (source, location)

        logger.debug("Registered file asset %s -> %s", file_name, location.object_key)
        return location

    def list_assets(self) -> list[FileAssetSource]:
        """List all registered asset sources."""
        return [source for source, _ in self._assets.values()]

    def manifest(self) -> dict[str, Any]:
        """Render the asset manifest consumed by the deployment tooling."""
        files = {}
        for source_hash, (source, location) in self._assets.items():
            files[source_hash] = {
                "source": {
                    "path": source.file_name,
                    "packaging": source.packaging.value,
                },
                "destinations": {
                    "current_account-current_region": {
                        "bucketName": location.bucket_name.render(),
                        "objectKey": location.object_key,
                    },
                },
            }

        return {"version": "1.0", "files": files}
