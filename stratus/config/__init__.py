"""
Configuration classes for Stratus.

Provider configuration describes a custom resource provider; synthesis
settings describe where and how stacks are written out.
"""

from stratus.config.provider import (
    CustomResourceProviderConfig,
    CustomResourceProviderRuntime,
)
from stratus.config.settings import SynthesisSettings

__all__ = [
    "CustomResourceProviderConfig",
    "CustomResourceProviderRuntime",
    "SynthesisSettings",
]
