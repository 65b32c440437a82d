"""
Stack: Container for all resources of one deployable unit.

A Stack is the root of a construct tree. It owns the synthesizer that
publishes assets, acts as the registry scope for stack-level singletons,
and renders every resource in its tree into a single template.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from constructs import Construct, RootConstruct

from stratus.assets.synthesizer import DefaultSynthesizer
from stratus.config.settings import SynthesisSettings
from stratus.core.resource import CfnResource

logger = logging.getLogger(__name__)

TEMPLATE_FORMATS = ("json", "yaml")


class ConstructError(Exception):
    """Raised when a construct is used outside of a stack."""
    pass


class SynthesisError(Exception):
    """Raised when a stack cannot be written out."""
    pass


class Stack(RootConstruct):
    """
    Container for all resources in a deployment.

    Example:
        from stratus import Stack

        stack = Stack("my-stack", settings=SynthesisSettings(outdir="./stratus.out"))

        role = CfnResource(stack, "Role", type="AWS::IAM::Role", properties={...})

        stack.to_template()   # {"Resources": {"Role": {...}}}
        stack.synthesize()    # writes my-stack.template.json
    """

    def __init__(
        self,
        name: str,
        settings: SynthesisSettings | None = None,
        synthesizer: DefaultSynthesizer | None = None,
    ):
        """
        Create a stack.

        Args:
            name: Stack name
            settings: Synthesis settings (defaults to in-memory synthesis)
            synthesizer: Asset synthesizer (defaults to DefaultSynthesizer)
        """
        super().__init__(name)
        self.name = name
        self.settings = settings or SynthesisSettings()
        self.synthesizer = synthesizer or DefaultSynthesizer(self.settings)

    @property
    def outdir(self) -> str | None:
        """Output directory for templates and staged assets."""
        return self.settings.outdir

    @staticmethod
    def of(construct: Construct) -> 'Stack':
        """
        Return the stack a construct belongs to.

        Raises:
            ConstructError: If the construct is not inside a stack
        """
        for scope in reversed(construct.node.scopes):
            if isinstance(scope, Stack):
                return scope
        raise ConstructError(
            f"'{construct.node.path}' should be created in the scope of a Stack, but no Stack found"
        )

    def list_resources(self) -> list[CfnResource]:
        """List all resources in this stack, in tree order."""
        return [c for c in self.node.find_all() if isinstance(c, CfnResource)]

    def get_resource(self, logical_id: str) -> CfnResource | None:
        """Get a resource by logical id."""
        for resource in self.list_resources():
            if resource.logical_id == logical_id:
                return resource
        return None

    def to_template(self) -> dict[str, Any]:
        """
        Render the stack into a template.

        Raises:
            SynthesisError: If two resources render to the same logical id
        """
        resources: dict[str, Any] = {}
        for resource in self.list_resources():
            logical_id = resource.logical_id
            if logical_id in resources:
                raise SynthesisError(
                    f"Duplicate logical id '{logical_id}' in stack '{self.name}'"
                )
            resources[logical_id] = resource.to_template()

        return {"Resources": resources}

    def synthesize(self, outdir: str | Path | None = None, format: str = "json") -> Path:
        """
        Write the template and asset manifest to disk.

        Args:
            outdir: Output directory (defaults to the stack's outdir)
            format: Template format, "json" or "yaml"

        Returns:
            Path of the written template

        Raises:
            SynthesisError: If there is no output directory or writing fails
        """
        if format not in TEMPLATE_FORMATS:
            raise SynthesisError(f"Unsupported template format '{format}'")

        target_dir = outdir or self.outdir
        if target_dir is None:
            raise SynthesisError(
                f"Stack '{self.name}' has no output directory. "
                "Pass outdir or set SynthesisSettings(outdir=...)"
            )
        target_dir = Path(target_dir)

        template = self.to_template()
        template_path = target_dir / f"{self.name}.template.{format}"
        manifest_path = target_dir / f"{self.name}.assets.json"

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            with open(template_path, "w") as f:
                if format == "yaml":
                    yaml.safe_dump(template, f, sort_keys=False)
                else:
                    json.dump(template, f, indent=1)
            with open(manifest_path, "w") as f:
                json.dump(self.synthesizer.manifest(), f, indent=1)
        except OSError as e:
            raise SynthesisError(f"Failed to synthesize stack '{self.name}': {e}") from e

        logger.info(
            "Synthesized stack '%s' (%d resources) to %s",
            self.name,
            len(template["Resources"]),
            template_path,
        )
        return template_path

    def __repr__(self):
        return f"Stack(name='{self.name}')"
