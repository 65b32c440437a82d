"""
Asset staging: Content-addressed copies of local directories.

A staged asset is identified by a hash of its contents, so the same
directory always maps to the same asset no matter when or where it is
staged, and an unchanged directory is never uploaded twice.
"""

import hashlib
import logging
import os
import shutil
from pathlib import Path

from constructs import Construct

logger = logging.getLogger(__name__)

IGNORED_NAMES = ("__pycache__", ".DS_Store")
CHUNK_SIZE = 8192


def compute_directory_hash(dir_path: str | Path) -> str:
    """
    Compute a SHA256 hash over all files in a directory.

    Both relative paths and file contents feed the hash, and files are
    visited in sorted order, so the result only depends on what the
    directory contains.

    Raises:
        FileNotFoundError: If the directory doesn't exist
    """
    dir_path = Path(dir_path)
    if not dir_path.is_dir():
        raise FileNotFoundError(f"Directory not found: {dir_path}")

    hasher = hashlib.sha256()

    for root, dirs, files in os.walk(dir_path):
        dirs[:] = sorted(d for d in dirs if d not in IGNORED_NAMES)

        for filename in sorted(files):
            if filename in IGNORED_NAMES:
                continue
            file_path = Path(root) / filename
            rel_path = file_path.relative_to(dir_path).as_posix()

            file_hash = hashlib.sha256()
            with open(file_path, "rb") as f:
                for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
                    file_hash.update(chunk)

            hasher.update(rel_path.encode("utf-8"))
            hasher.update(b"\0")
            hasher.update(file_hash.digest())

    return hasher.hexdigest()


class AssetStaging(Construct):
    """
    Stages a local directory as an asset of the enclosing stack.

    When the stack has an output directory, the source is copied to
    <outdir>/asset.<hash>; otherwise the source directory itself is used
    as the staged location.

    Example:
        staging = AssetStaging(provider, "Staging", source_path="./handler")
        staging.asset_hash                 # "3f7a..."
        staging.relative_staged_path(stack)  # "asset.3f7a..."
    """

    def __init__(self, scope: Construct, id: str, source_path: str | Path):
        super().__init__(scope, id)

        from stratus.core.stack import Stack

        self.source_path = Path(source_path).resolve()
        self.asset_hash = compute_directory_hash(self.source_path)
        self.staged_path = self._stage(Stack.of(self).outdir)

    def _stage(self, outdir: str | None) -> Path:
        if outdir is None:
            logger.debug("No outdir, using %s in place", self.source_path)
            return self.source_path

        target = Path(outdir).resolve() / f"asset.{self.asset_hash}"
        if target.exists():
            logger.debug("Asset %s already staged at %s", self.asset_hash, target)
            return target

        logger.debug("Staging %s to %s", self.source_path, target)
        shutil.copytree(
            self.source_path, target, ignore=shutil.ignore_patterns(*IGNORED_NAMES)
        )
        return target

    def relative_staged_path(self, stack) -> str:
        """
        Return the staged path relative to the stack's output directory.

        Falls back to the absolute staged path when the stack keeps
        everything in memory.
        """
        if stack.outdir is None:
            return str(self.staged_path)
        return os.path.relpath(self.staged_path, Path(stack.outdir).resolve())
