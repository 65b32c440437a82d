"""
CustomResource: A resource whose lifecycle is implemented by a provider.
"""

from typing import Any

from constructs import Construct

from stratus.core.resource import CfnResource
from stratus.core.tokens import Literal, Reference

DEFAULT_RESOURCE_TYPE = "AWS::CloudFormation::CustomResource"


class CustomResource(Construct):
    """
    Instantiates a custom resource backed by a provider's service token.

    Example:
        token = CustomResourceProvider.get_or_create(stack, "Custom::Greeter", config)
        greeting = CustomResource(
            stack, "Greeting",
            service_token=token,
            resource_type="Custom::Greeter",
            properties={"Name": "world"},
        )
        greeting.get_att("Message")
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        service_token: Reference | str,
        resource_type: str = DEFAULT_RESOURCE_TYPE,
        properties: dict[str, Any] | None = None,
    ):
        if resource_type != DEFAULT_RESOURCE_TYPE and not resource_type.startswith("Custom::"):
            raise ValueError(
                f"Custom resource type must begin with \"Custom::\" ({resource_type})"
            )

        super().__init__(scope, id)

        if isinstance(service_token, str):
            service_token = Literal(service_token)
        self.service_token = service_token

        self.resource = CfnResource(self, "Default", type=resource_type, properties={
            "ServiceToken": self.service_token,
            **(properties or {}),
        })

    @property
    def ref(self) -> str:
        """Logical id of the underlying resource."""
        return self.resource.logical_id

    def get_att(self, attribute: str) -> Reference:
        """Return a deferred reference to an attribute returned by the provider."""
        return self.resource.get_att(attribute)
