"""ResolverService: command name + arguments to a dashboard URL.

Pipeline: LOOKUP -> VALIDATE -> SELECT -> SUBSTITUTE -> RESPOND

Resolution is a pure function of the catalog, the request and the
dashboard settings. Every failure is reported before substitution, so a
result either carries a complete URL or none at all.
"""

from __future__ import annotations

import logging

from cfurl.domain.catalog import get_command_spec
from cfurl.domain.models import CommandSpec, ResolvedRequest
from cfurl.domain.templates import build_url, render_template
from cfurl.domain.types import Arity, ErrorCode
from cfurl.services.base import BaseService
from cfurl.services.result import ServiceResult, failure

logger = logging.getLogger(__name__)

OP = "resolve"


class ResolverService(BaseService):
    """Resolves dashboard commands against the static catalog."""

    def resolve(self, command: str, request: ResolvedRequest | None = None) -> ServiceResult:
        """Resolve *command* with *request* into a dashboard URL.

        On success ``data`` holds ``command`` (primary name), ``template``
        (the path template used) and ``url``.
        """
        request = request or ResolvedRequest()

        # ── LOOKUP ───────────────────────────────────────────
        spec = get_command_spec(command)
        if spec is None:
            return failure(
                OP,
                ErrorCode.UNKNOWN_COMMAND,
                f"unknown command {command!r}; run with --help",
                command=command,
            )

        # ── VALIDATE ─────────────────────────────────────────
        error = _validate(spec, request)
        if error is not None:
            return error

        # ── SELECT ───────────────────────────────────────────
        template, values = _select(spec, request)

        # ── SUBSTITUTE ───────────────────────────────────────
        dashboard = self._settings.dashboard
        path = render_template(template, values)
        url = build_url(path, base_url=dashboard.base_url, account_id=dashboard.account_id)
        logger.debug("Resolved %s via %r -> %s", spec.name, template, url)

        # ── RESPOND ──────────────────────────────────────────
        return ServiceResult(
            ok=True,
            op=OP,
            data={"command": spec.name, "template": template, "url": url},
        )


def _validate(spec: CommandSpec, request: ResolvedRequest) -> ServiceResult | None:
    """Return a failure result if *request* does not fit *spec*."""
    name = spec.name

    if request.zone is not None and request.resource is not None:
        return failure(
            OP,
            ErrorCode.AMBIGUOUS_ARGUMENTS,
            f"{name!r} received both a zone and a resource name; pass only one",
            command=name,
            zone=request.zone,
            resource=request.resource,
        )

    if request.extra:
        extra = ", ".join(repr(arg) for arg in request.extra)
        if spec.takes_zone or spec.takes_resource:
            message = f"{name!r} got unexpected extra argument(s): {extra}"
        else:
            message = f"{name!r} takes no arguments; got {extra}"
        return failure(
            OP,
            ErrorCode.UNEXPECTED_ARGUMENT,
            message,
            command=name,
            extra=list(request.extra),
        )

    if request.zone is not None and not spec.takes_zone:
        return failure(
            OP,
            ErrorCode.UNEXPECTED_ARGUMENT,
            f"{name!r} does not take a zone",
            command=name,
            zone=request.zone,
        )
    if request.resource is not None and not spec.takes_resource:
        return failure(
            OP,
            ErrorCode.UNEXPECTED_ARGUMENT,
            f"{name!r} does not take a resource name",
            command=name,
            resource=request.resource,
        )
    if request.section is not None and not spec.sections:
        return failure(
            OP,
            ErrorCode.UNEXPECTED_ARGUMENT,
            f"{name!r} does not accept --section",
            command=name,
            section=request.section,
        )

    if spec.zone is Arity.REQUIRED and request.zone is None:
        return failure(
            OP,
            ErrorCode.MISSING_REQUIRED_ARGUMENT,
            f"{name!r} requires a zone, e.g. 'cfurl {name} example.com'",
            command=name,
            missing="zone",
        )
    if spec.resource is Arity.REQUIRED and request.resource is None:
        return failure(
            OP,
            ErrorCode.MISSING_REQUIRED_ARGUMENT,
            f"{name!r} requires a {spec.resource_label.lower()}",
            command=name,
            missing="resource",
        )

    if request.section is not None and request.section not in spec.sections:
        return failure(
            OP,
            ErrorCode.INVALID_FLAG_VALUE,
            f"invalid section {request.section!r} for {name!r}; "
            f"choose from: {', '.join(spec.sections)}",
            command=name,
            section=request.section,
            choices=list(spec.sections),
        )
    return None


def _select(spec: CommandSpec, request: ResolvedRequest) -> tuple[str, dict[str, str]]:
    """Pick the template variant and the values it substitutes."""
    values: dict[str, str] = {}
    if request.zone is not None:
        values["zone"] = request.zone
    if request.resource is not None:
        values["resource"] = request.resource

    if request.section is not None and spec.section_template is not None:
        values["section"] = request.section
        return spec.section_template, values

    optional = spec.optional_field
    if optional is not None and optional in values and spec.qualified_template is not None:
        return spec.qualified_template, values
    return spec.template, values
