"""
Core Stratus functionality.

- CfnResource: Resource declarations rendered into templates
- Stack: Root of the construct tree, registry scope and synthesis entry point
- Tokens: Values only known at deploy time

The construct tree itself comes from the `constructs` library; Construct is
re-exported here for grouping resources below a stack.
"""

from constructs import Construct

from stratus.core.units import Duration, Size
from stratus.core.tokens import Reference, Literal, GetAtt, Sub, resolve
from stratus.core.resource import CfnResource, make_unique_id
from stratus.core.stack import ConstructError, Stack, SynthesisError

__all__ = [
    "Duration",
    "Size",
    "Reference",
    "Literal",
    "GetAtt",
    "Sub",
    "resolve",
    "Construct",
    "ConstructError",
    "CfnResource",
    "make_unique_id",
    "Stack",
    "SynthesisError",
]
