"""
Assets: Staging and publishing of local files for deployment.
"""

from stratus.assets.staging import AssetStaging, compute_directory_hash
from stratus.assets.synthesizer import (
    DefaultSynthesizer,
    FileAssetLocation,
    FileAssetPackaging,
    FileAssetSource,
)

__all__ = [
    "AssetStaging",
    "compute_directory_hash",
    "DefaultSynthesizer",
    "FileAssetLocation",
    "FileAssetPackaging",
    "FileAssetSource",
]
