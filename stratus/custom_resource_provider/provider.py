"""
CustomResourceProvider: Stack-level Lambda function backing custom resources.

A provider bundles a local handler directory into a zip asset and deploys it
as a Lambda function with its own execution role. Providers are singletons
per stack: every call to get_or_create() with the same unique id returns
the same function.
"""

import logging
import shutil
import threading
from pathlib import Path
from typing import Any

from constructs import Construct

from stratus.assets.staging import AssetStaging
from stratus.assets.synthesizer import FileAssetPackaging
from stratus.config.provider import (
    CustomResourceProviderConfig,
    CustomResourceProviderRuntime,
)
from stratus.core.resource import CfnResource
from stratus.core.stack import Stack
from stratus.core.tokens import GetAtt, Sub
from stratus.core.units import Duration, Size

logger = logging.getLogger(__name__)

ID_SUFFIX = "CustomResourceProvider"
ENTRYPOINT_FILENAME = "__entrypoint__"
HANDLER_FILENAME = "index"
POLICY_VERSION = "2012-10-17"
INLINE_POLICY_NAME = "Inline"
BASIC_EXECUTION_POLICY = (
    "arn:${AWS::Partition}:iam::aws:policy/service-role/AWSLambdaBasicExecutionRole"
)

DEFAULT_TIMEOUT = Duration.minutes(15)
DEFAULT_MEMORY_SIZE = Size.mebibytes(128)

_ENTRYPOINT_SOURCES = {
    ".js": Path(__file__).parent / "nodejs-entrypoint.js",
    ".py": Path(__file__).parent / "python-entrypoint.py",
}


class CustomResourceProviderError(Exception):
    """Base class for provider build errors."""
    pass


class EntrypointCopyError(CustomResourceProviderError):
    """Raised when the entrypoint wrapper cannot be copied into the code directory."""
    pass


class MissingHandlerError(CustomResourceProviderError):
    """Raised when the code directory has no index handler file."""
    pass


def prepare_code_directory(
    code_directory: str | Path,
    runtime: CustomResourceProviderRuntime,
) -> Path:
    """
    Make a handler directory deployable as a provider.

    Writes exactly one file, __entrypoint__.js (or .py), into code_directory
    and then checks that index.js (or .py) sits directly inside it. The
    caller's directory is modified in place.

    Returns:
        Path of the copied entrypoint

    Raises:
        EntrypointCopyError: If the entrypoint can't be written
        MissingHandlerError: If the index handler file is missing
    """
    code_directory = Path(code_directory)
    extension = runtime.handler_extension

    entrypoint = code_directory / f"{ENTRYPOINT_FILENAME}{extension}"
    try:
        shutil.copyfile(_ENTRYPOINT_SOURCES[extension], entrypoint)
    except OSError as e:
        raise EntrypointCopyError(
            f"cannot copy entrypoint to {entrypoint}: {e}"
        ) from e

    handler = code_directory / f"{HANDLER_FILENAME}{extension}"
    if not handler.exists():
        raise MissingHandlerError(f"cannot find {handler}")

    return entrypoint


def render_environment_variables(env: dict[str, str] | None) -> dict[str, Any] | None:
    """
    Render the Environment property of the function.

    Keys are emitted in sorted order: the function's version fingerprint is
    computed from the serialized block and must not depend on the order the
    caller inserted keys in. An absent or empty map renders as None so the
    property is left out altogether.
    """
    if not env:
        return None

    variables = {key: env[key] for key in sorted(env)}
    return {"Variables": variables}


def render_inline_policies(statements: list[dict[str, Any]] | None) -> list[dict[str, Any]] | None:
    """
    Wrap raw policy statements into a single inline policy, or None.

    An empty list is treated like None: the role gets no Policies property
    rather than an Inline policy with an empty Statement.
    """
    if not statements:
        return None

    return [
        {
            "PolicyName": INLINE_POLICY_NAME,
            "PolicyDocument": {
                "Version": POLICY_VERSION,
                "Statement": list(statements),
            },
        }
    ]


class CustomResourceProvider(Construct):
    """
    An AWS Lambda backed custom resource provider.

    Use get_or_create() to obtain the service token of a stack-level
    singleton provider, or get_or_create_provider() when the role ARN is
    needed as well. The constructor is not meant to be called directly.

    Example:
        service_token = CustomResourceProvider.get_or_create(
            self, "Custom::AutoDeleteObjects",
            CustomResourceProviderConfig(
                code_directory="./handlers/auto-delete",
                runtime=CustomResourceProviderRuntime.NODEJS_14_X,
            ),
        )

        CustomResource(self, "AutoDelete", service_token=service_token)
    """

    # Held across stack lookup, child lookup and construction
    _registry_lock = threading.RLock()

    @classmethod
    def get_or_create(
        cls,
        scope: Construct,
        uniqueid: str,
        config: CustomResourceProviderConfig,
    ) -> GetAtt:
        """
        Return the service token of a stack-level singleton provider.

        Args:
            scope: Any construct inside the target stack
            uniqueid: Id of the provider, unique within the stack
            config: Provider configuration, only applied when the provider
                is first created

        Returns:
            Service token to pass to CustomResource
        """
        return cls.get_or_create_provider(scope, uniqueid, config).service_token

    @classmethod
    def get_or_create_provider(
        cls,
        scope: Construct,
        uniqueid: str,
        config: CustomResourceProviderConfig,
    ) -> 'CustomResourceProvider':
        """
        Return a stack-level singleton provider.

        If the stack already has a provider for uniqueid, it is returned as
        is and config is ignored, even if it differs from the configuration
        the provider was created with. A construction that fails is removed
        from the stack again, so a later call starts from scratch.

        Args:
            scope: Any construct inside the target stack
            uniqueid: Id of the provider, unique within the stack
            config: Provider configuration, only applied when the provider
                is first created

        Returns:
            The provider
        """
        id = f"{uniqueid}{ID_SUFFIX}"

        with cls._registry_lock:
            stack = Stack.of(scope)

            existing = stack.node.try_find_child(id)
            if existing is not None:
                logger.debug("Reusing provider '%s' in stack '%s'", id, stack.name)
                return existing

            try:
                return cls(stack, id, config)
            except Exception:
                stack.node.try_remove_child(id)
                raise

    def __init__(self, scope: Construct, id: str, config: CustomResourceProviderConfig):
        # Everything that can reject the config runs before registration
        prepare_code_directory(config.code_directory, config.runtime)
        timeout_seconds = (config.timeout or DEFAULT_TIMEOUT).to_seconds()
        memory_mebibytes = (config.memory_size or DEFAULT_MEMORY_SIZE).to_mebibytes()

        super().__init__(scope, id)
        self.config = config

        stack = Stack.of(scope)

        self.staging = AssetStaging(self, "Staging", source_path=config.code_directory)

        asset = stack.synthesizer.add_file_asset(
            file_name=self.staging.relative_staged_path(stack),
            source_hash=self.staging.asset_hash,
            packaging=FileAssetPackaging.ZIP_DIRECTORY,
        )

        self.role = CfnResource(self, "Role", type="AWS::IAM::Role", properties={
            "AssumeRolePolicyDocument": {
                "Version": POLICY_VERSION,
                "Statement": [
                    {
                        "Action": "sts:AssumeRole",
                        "Effect": "Allow",
                        "Principal": {"Service": "lambda.amazonaws.com"},
                    }
                ],
            },
            "ManagedPolicyArns": [Sub(BASIC_EXECUTION_POLICY)],
            "Policies": render_inline_policies(config.policy_statements),
        })
        self.role_arn = self.role.get_att("Arn")

        self.handler = CfnResource(self, "Handler", type="AWS::Lambda::Function", properties={
            "Code": {
                "S3Bucket": asset.bucket_name,
                "S3Key": asset.object_key,
            },
            "Timeout": timeout_seconds,
            "MemorySize": memory_mebibytes,
            "Handler": f"{ENTRYPOINT_FILENAME}.handler",
            "Role": self.role.get_att("Arn"),
            "Runtime": config.runtime.value,
            "Environment": render_environment_variables(config.environment),
            "Description": config.description,
        })

        self.handler.add_depends_on(self.role)

        self.service_token = self.handler.get_att("Arn")

        logger.debug(
            "Created provider '%s' (runtime=%s, asset=%s)",
            self.node.path,
            config.runtime.value,
            self.staging.asset_hash,
        )

    def __repr__(self):
        return f"CustomResourceProvider(path='{self.node.path}')"
