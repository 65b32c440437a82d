"""
CfnResource: A single resource declaration in a stack template.

Resources register themselves in the construct tree, receive a logical id
derived from their path below the stack, and render to the template shape:

    {"Type": ..., "Properties": {...}, "DependsOn": [...]}
"""

import hashlib
import re
from typing import Any

from constructs import Construct

from stratus.core.tokens import GetAtt, resolve

HASH_LEN = 8
HIDDEN_ID = "Default"

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")


def make_unique_id(components: list[str]) -> str:
    """
    Build a template-safe logical id from path components.

    A single component is used as-is (minus non-alphanumerics). Longer paths
    get a short md5 suffix of the full path so that ids stay unique even when
    sanitizing collapses two different paths to the same human-readable part.
    """
    components = [c for c in components if c]
    if not components:
        raise ValueError("Unable to calculate a unique id for an empty path")

    if len(components) == 1:
        candidate = _NON_ALPHANUMERIC.sub("", components[0])
        if candidate:
            return candidate

    path_hash = hashlib.md5("/".join(components).encode("utf-8")).hexdigest()
    suffix = path_hash[:HASH_LEN].upper()
    human = "".join(
        _NON_ALPHANUMERIC.sub("", c) for c in components if c != HIDDEN_ID
    )
    return f"{human}{suffix}"


class CfnResource(Construct):
    """
    A resource of an arbitrary type with free-form properties.

    Example:
        role = CfnResource(stack, "Role", type="AWS::IAM::Role", properties={
            "AssumeRolePolicyDocument": {...},
        })
        handler = CfnResource(stack, "Handler", type="AWS::Lambda::Function", properties={
            "Role": role.get_att("Arn"),
        })
        handler.add_depends_on(role)
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        type: str,
        properties: dict[str, Any] | None = None,
    ):
        super().__init__(scope, id)
        self.type = type
        self.properties = dict(properties or {})
        self._depends_on: list['CfnResource'] = []

    @property
    def logical_id(self) -> str:
        """Logical id of this resource within its stack template."""
        from stratus.core.stack import Stack

        stack = Stack.of(self)
        components = [c.node.id for c in self.node.scopes[len(stack.node.scopes):]]
        return make_unique_id(components)

    @property
    def depends_on(self) -> list['CfnResource']:
        return list(self._depends_on)

    def get_att(self, attribute: str) -> GetAtt:
        """Return a deferred reference to one of this resource's attributes."""
        return GetAtt(self, attribute)

    def add_depends_on(self, target: 'CfnResource') -> None:
        """Declare that this resource must be created after target."""
        if target is self:
            raise ValueError(f"Resource '{self.node.path}' cannot depend on itself")
        if target not in self._depends_on:
            self._depends_on.append(target)

    def to_template(self) -> dict[str, Any]:
        """Render this resource into its template representation."""
        rendered: dict[str, Any] = {"Type": self.type}

        # Only top-level None marks an omitted property; nested values pass through
        properties = resolve(
            {key: value for key, value in self.properties.items() if value is not None}
        )
        if properties:
            rendered["Properties"] = properties

        if self._depends_on:
            rendered["DependsOn"] = sorted(d.logical_id for d in self._depends_on)

        return rendered

    def __repr__(self):
        return f"CfnResource(type='{self.type}', path='{self.node.path}')"
