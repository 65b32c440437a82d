"""
Greeter: A custom resource that returns a greeting.

Run with:
    stratus synth examples/greeter_app.py --output ./stratus.out
"""

from pathlib import Path

from stratus import (
    CustomResource,
    CustomResourceProvider,
    CustomResourceProviderConfig,
    CustomResourceProviderRuntime,
    Duration,
    Stack,
    SynthesisSettings,
)

stack = Stack("greeter", settings=SynthesisSettings.from_env())

config = CustomResourceProviderConfig(
    code_directory=Path(__file__).parent / "greeter",
    runtime=CustomResourceProviderRuntime.NODEJS_14_X,
    timeout=Duration.minutes(1),
    environment={"GREETING": "Hello"},
)

# Both resources share one provider function
token = CustomResourceProvider.get_or_create(stack, "Custom::Greeter", config)

alice = CustomResource(
    stack, "Alice",
    service_token=token,
    resource_type="Custom::Greeter",
    properties={"Name": "Alice"},
)
bob = CustomResource(
    stack, "Bob",
    service_token=CustomResourceProvider.get_or_create(stack, "Custom::Greeter", config),
    resource_type="Custom::Greeter",
    properties={"Name": "Bob"},
)
