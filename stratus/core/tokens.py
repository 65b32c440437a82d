"""
Tokens: Values that are only known once a stack is deployed.

A resource's ARN does not exist at build time. Instead of smuggling such
values through plain strings, they are modelled as explicit reference
variants and rendered into template intrinsics during synthesis:

- Literal: a value known now, rendered as-is
- GetAtt: an attribute of a resource in the same stack (Fn::GetAtt)
- Sub: a string template substituted at deploy time (Fn::Sub)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from stratus.core.resource import CfnResource


class Reference(ABC):
    """Base class for values resolved during synthesis."""

    @abstractmethod
    def render(self) -> Any:
        """Render the reference into its template representation."""
        pass

    def is_deferred(self) -> bool:
        """Whether the value is only known after deployment."""
        return True


@dataclass(frozen=True)
class Literal(Reference):
    """A value that is already known at build time."""

    value: Any

    def render(self) -> Any:
        return self.value

    def is_deferred(self) -> bool:
        return False


@dataclass(frozen=True, eq=False)
class GetAtt(Reference):
    """
    An attribute of a resource, resolved at deploy time.

    Example:
        role = CfnResource(stack, "Role", type="AWS::IAM::Role")
        arn = role.get_att("Arn")
        arn.render()  # {"Fn::GetAtt": ["Role", "Arn"]}
    """

    target: 'CfnResource'
    attribute: str

    def render(self) -> dict[str, list[str]]:
        return {"Fn::GetAtt": [self.target.logical_id, self.attribute]}

    def __eq__(self, other):
        if not isinstance(other, GetAtt):
            return NotImplemented
        return self.target is other.target and self.attribute == other.attribute

    def __hash__(self):
        return hash((id(self.target), self.attribute))

    def __repr__(self):
        return f"GetAtt({self.target.node.path}.{self.attribute})"


@dataclass(frozen=True)
class Sub(Reference):
    """A string with ${...} placeholders substituted at deploy time."""

    template: str

    def render(self) -> dict[str, str]:
        return {"Fn::Sub": self.template}


def resolve(value: Any) -> Any:
    """
    Render a property tree into plain template values.

    References are rendered and containers are walked recursively. Every
    other value, None included, is returned unchanged: dropping omitted
    properties is up to the resource that owns them.
    """
    if isinstance(value, Reference):
        return resolve(value.render())
    if isinstance(value, dict):
        return {k: resolve(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [resolve(v) for v in value]
    return value
