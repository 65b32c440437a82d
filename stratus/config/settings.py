"""
Synthesis settings.

Controls where synthesized templates and staged assets are written and
where file assets are published.
"""

import os

from pydantic import BaseModel, Field

DEFAULT_QUALIFIER = "hnb659fds"
DEFAULT_FILE_ASSETS_BUCKET_NAME = "stratus-${Qualifier}-assets-${AWS::AccountId}-${AWS::Region}"


class SynthesisSettings(BaseModel):
    """
    Settings shared by a stack and its synthesizer.

    Example:
        settings = SynthesisSettings(outdir="./stratus.out")

        # From environment (STRATUS_OUTDIR, STRATUS_QUALIFIER)
        settings = SynthesisSettings.from_env()
    """

    outdir: str | None = Field(
        default=None,
        description="Output directory for templates and staged assets (None keeps everything in memory)",
    )
    qualifier: str = Field(
        default=DEFAULT_QUALIFIER,
        description="Bootstrap qualifier used in the assets bucket name",
    )
    file_assets_bucket_name: str = Field(
        default=DEFAULT_FILE_ASSETS_BUCKET_NAME,
        description="Bucket name template for file assets (Fn::Sub syntax, ${Qualifier} is replaced at build time)",
    )

    class Config:
        frozen = True

    @classmethod
    def from_env(cls, **kwargs) -> 'SynthesisSettings':
        """Load settings from environment variables, with kwargs taking precedence."""
        outdir = kwargs.get("outdir") or os.getenv("STRATUS_OUTDIR")
        qualifier = kwargs.get("qualifier") or os.getenv("STRATUS_QUALIFIER", DEFAULT_QUALIFIER)
        bucket_name = kwargs.get("file_assets_bucket_name") or os.getenv(
            "STRATUS_FILE_ASSETS_BUCKET_NAME", DEFAULT_FILE_ASSETS_BUCKET_NAME
        )

        return cls(
            outdir=outdir,
            qualifier=qualifier,
            file_assets_bucket_name=bucket_name,
        )
