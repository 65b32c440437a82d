"""
Stratus: Stack-scoped custom resource providers from code.

Stratus builds the Lambda function and IAM role that back custom resources,
once per stack, from a local directory of handler code.

Core concepts:
- Stack: Root of the construct tree and registry for singletons
- CfnResource: A resource declaration rendered into the template
- CustomResourceProvider: Stack-level singleton function + role
- CustomResource: A resource implemented by a provider

Example:
    from stratus import (
        Stack, CustomResource, CustomResourceProvider,
        CustomResourceProviderConfig, CustomResourceProviderRuntime,
    )

    stack = Stack("my-stack")

    token = CustomResourceProvider.get_or_create(
        stack, "Custom::Greeter",
        CustomResourceProviderConfig(
            code_directory="./greeter",
            runtime=CustomResourceProviderRuntime.NODEJS_14_X,
        ),
    )

    CustomResource(stack, "Greeting", service_token=token, resource_type="Custom::Greeter")

    stack.to_template()
"""

from stratus.core import (
    CfnResource,
    Construct,
    Duration,
    GetAtt,
    Literal,
    Reference,
    Size,
    Stack,
    Sub,
)
from stratus.config import (
    CustomResourceProviderConfig,
    CustomResourceProviderRuntime,
    SynthesisSettings,
)
from stratus.custom_resource_provider import CustomResourceProvider
from stratus.custom_resource import CustomResource

__version__ = "0.1.0"
__all__ = [
    "CfnResource",
    "Construct",
    "Duration",
    "GetAtt",
    "Literal",
    "Reference",
    "Size",
    "Stack",
    "Sub",
    "CustomResourceProviderConfig",
    "CustomResourceProviderRuntime",
    "SynthesisSettings",
    "CustomResourceProvider",
    "CustomResource",
]
