"""
Custom resource providers: Stack-level singleton Lambda functions that
implement the lifecycle of custom resources.
"""

from stratus.config.provider import (
    CustomResourceProviderConfig,
    CustomResourceProviderRuntime,
)
from stratus.custom_resource_provider.provider import (
    CustomResourceProvider,
    CustomResourceProviderError,
    EntrypointCopyError,
    MissingHandlerError,
    prepare_code_directory,
    render_environment_variables,
    render_inline_policies,
)

__all__ = [
    "CustomResourceProvider",
    "CustomResourceProviderConfig",
    "CustomResourceProviderRuntime",
    "CustomResourceProviderError",
    "EntrypointCopyError",
    "MissingHandlerError",
    "prepare_code_directory",
    "render_environment_variables",
    "render_inline_policies",
]
