"""CommandSpec and ResolvedRequest: the data the resolver works from.

A CommandSpec is one row of the dashboard catalog. Its template fields are
checked at construction time so a broken row fails at import rather than
producing a half-substituted URL later.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator

from cfurl.domain.templates import PLACEHOLDERS, placeholders
from cfurl.domain.types import Arity


class CommandSpec(BaseModel):
    """A named dashboard command and the URL templates it expands to.

    Attributes:
        name: Unique command name (``dns``, ``workers``...).
        summary: One-line help text.
        template: Path used when no optional input is given.
        zone: Whether the command takes a zone.
        resource: Whether the command takes a resource name.
        resource_label: Metavar for the resource argument.
        qualified_template: Path used when the optional zone/resource is given.
        section_template: Path used when a ``--section`` value is given.
        sections: Legal ``--section`` values.
        aliases: Alternative names for the command.
    """

    model_config = {"frozen": True}

    name: str
    summary: str
    template: str
    zone: Arity = Arity.NONE
    resource: Arity = Arity.NONE
    resource_label: str = "NAME"
    qualified_template: str | None = None
    section_template: str | None = None
    sections: tuple[str, ...] = ()
    aliases: tuple[str, ...] = ()

    @property
    def takes_zone(self) -> bool:
        return self.zone is not Arity.NONE

    @property
    def takes_resource(self) -> bool:
        return self.resource is not Arity.NONE

    @property
    def optional_field(self) -> str | None:
        """The argument whose presence selects ``qualified_template``."""
        if self.zone is Arity.OPTIONAL:
            return "zone"
        if self.resource is Arity.OPTIONAL:
            return "resource"
        return None

    @property
    def required_fields(self) -> set[str]:
        fields: set[str] = set()
        if self.zone is Arity.REQUIRED:
            fields.add("zone")
        if self.resource is Arity.REQUIRED:
            fields.add("resource")
        return fields

    def names(self) -> tuple[str, ...]:
        """Primary name followed by aliases."""
        return (self.name, *self.aliases)

    @model_validator(mode="after")
    def _check_templates(self) -> Self:
        if self.takes_zone and self.takes_resource:
            msg = f"Command {self.name!r} cannot take both a zone and a resource"
            raise ValueError(msg)

        required = self.required_fields
        _check_fields(self.name, "template", self.template, required)

        optional = self.optional_field
        if optional is None:
            if self.qualified_template is not None:
                msg = f"Command {self.name!r} has a qualified_template but no optional argument"
                raise ValueError(msg)
        else:
            if self.qualified_template is None:
                msg = (
                    f"Command {self.name!r} takes an optional {optional} "
                    "but has no qualified_template"
                )
                raise ValueError(msg)
            _check_fields(
                self.name,
                "qualified_template",
                self.qualified_template,
                required | {optional},
                must_use=optional,
            )

        if bool(self.sections) != (self.section_template is not None):
            msg = (
                f"Command {self.name!r} must declare both sections "
                "and section_template, or neither"
            )
            raise ValueError(msg)
        if self.section_template is not None:
            _check_fields(
                self.name,
                "section_template",
                self.section_template,
                required | {"section"},
                must_use="section",
            )
        return self


def _check_fields(
    command: str,
    label: str,
    template: str,
    allowed: set[str],
    *,
    must_use: str | None = None,
) -> None:
    used = placeholders(template)
    unknown = used - PLACEHOLDERS
    if unknown:
        msg = f"Command {command!r} {label} uses unknown placeholder(s) {sorted(unknown)}"
        raise ValueError(msg)
    extra = used - allowed
    if extra:
        msg = f"Command {command!r} {label} references {sorted(extra)} which may be absent"
        raise ValueError(msg)
    if must_use is not None and must_use not in used:
        msg = f"Command {command!r} {label} never substitutes {must_use!r}"
        raise ValueError(msg)


class ResolvedRequest(BaseModel):
    """Arguments supplied for one invocation.

    A blank zone or resource is treated as absent. A blank section is kept
    so it fails section validation like any other illegal value.
    """

    model_config = {"frozen": True}

    zone: str | None = None
    resource: str | None = None
    section: str | None = None
    extra: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("zone", "resource", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value
