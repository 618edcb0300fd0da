"""CatalogService: describe the available dashboard commands."""

from __future__ import annotations

from typing import Any

from cfurl.domain.catalog import COMMANDS
from cfurl.domain.models import CommandSpec
from cfurl.domain.types import Arity
from cfurl.services.base import BaseService
from cfurl.services.result import ServiceResult


def describe_arguments(spec: CommandSpec) -> str:
    """Usage fragment for a command's positional argument.

    Examples: ``ZONE``, ``[BUCKET]``, or an empty string.
    """
    if spec.takes_zone:
        label = "ZONE"
        arity = spec.zone
    elif spec.takes_resource:
        label = spec.resource_label
        arity = spec.resource
    else:
        return ""
    return label if arity is Arity.REQUIRED else f"[{label}]"


class CatalogService(BaseService):
    """Read-only view over the command catalog."""

    def list_commands(self) -> ServiceResult:
        items: list[dict[str, Any]] = [
            {
                "name": spec.name,
                "aliases": list(spec.aliases),
                "arguments": describe_arguments(spec),
                "sections": list(spec.sections),
                "summary": spec.summary,
            }
            for spec in COMMANDS.values()
        ]
        return ServiceResult(
            ok=True,
            op="list_commands",
            data={"count": len(items), "items": items},
        )
