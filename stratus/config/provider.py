"""
Custom resource provider configuration.

These classes provide type-safe configuration for the stack-level function
that backs custom resources.
"""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from stratus.core.units import Duration, Size


class CustomResourceProviderRuntime(str, Enum):
    """
    The Lambda runtime used by a provider.

    The runtime also selects the handler language: Node.js runtimes expect
    index.js, Python runtimes expect index.py.
    """

    NODEJS_12_X = "nodejs12.x"
    NODEJS_14_X = "nodejs14.x"
    PYTHON_3_9 = "python3.9"
    PYTHON_3_11 = "python3.11"

    # Deprecated alias of NODEJS_12_X
    NODEJS_12 = "nodejs12.x"

    @property
    def handler_extension(self) -> str:
        """File extension of handler and entrypoint files for this runtime."""
        if self.value.startswith("python"):
            return ".py"
        return ".js"


class CustomResourceProviderConfig(BaseModel):
    """
    Configuration of a custom resource provider.

    Only the configuration of the first caller for a given provider id takes
    effect; later calls reuse the existing provider unchanged.

    Example:
        config = CustomResourceProviderConfig(
            code_directory="./handlers/auto-delete",
            runtime=CustomResourceProviderRuntime.NODEJS_14_X,
            policy_statements=[
                {"Effect": "Allow", "Action": "s3:DeleteObject*", "Resource": "*"},
            ],
            timeout=Duration.minutes(5),
            environment={"LOG_LEVEL": "debug"},
        )
    """

    code_directory: Path = Field(
        ..., description="Local directory with the handler code (must contain index.js/index.py)"
    )
    runtime: CustomResourceProviderRuntime = Field(
        ..., description="Lambda runtime of the provider function"
    )
    policy_statements: list[dict[str, Any]] | None = Field(
        default=None,
        description="Raw IAM policy statements for the inline policy of the role",
    )
    timeout: Duration | None = Field(
        default=None, description="Function timeout (default 15 minutes)"
    )
    memory_size: Size | None = Field(
        default=None, description="Function memory (default 128 MiB)"
    )
    environment: dict[str, str] | None = Field(
        default=None, description="Environment variables of the function"
    )
    description: str | None = Field(
        default=None, description="Description of the function"
    )

    class Config:
        arbitrary_types_allowed = True
        frozen = True
