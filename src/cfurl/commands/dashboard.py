"""Command factory: one Click command per dashboard catalog entry.

Commands are generated from :data:`cfurl.domain.catalog.COMMANDS`, so a
new dashboard page needs no CLI code. Positional arguments are optional at
the Click level; the resolver decides what is missing or unexpected and
picks the exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cfurl.commands._base import CfCommand
from cfurl.domain.models import CommandSpec, ResolvedRequest
from cfurl.services.catalog import describe_arguments

if TYPE_CHECKING:
    from cfurl.commands._context import AppContext

# Extra positional args are collected into ctx.args and rejected by the
# resolver rather than by Click.
_CONTEXT_SETTINGS = {"allow_extra_args": True}


def open_dashboard(app: AppContext, command: str, request: ResolvedRequest) -> None:
    """Resolve *command*, then hand the URL to the browser unless disabled."""
    from cfurl.services.resolver import ResolverService

    resolved = ResolverService(app.settings).resolve(command, request)
    if not resolved.ok or not app.settings.should_open:
        app.emit(resolved)
        return

    from cfurl.services.launcher import LauncherService

    with app.status("Opening in your browser..."):
        result = LauncherService(app.settings).launch(resolved)
    app.emit(result)


def _examples(spec: CommandSpec) -> str:
    lines: list[str] = []
    if spec.takes_zone:
        lines.append(f"cfurl {spec.name} example.com")
        lines.extend(f"cfurl {spec.name} example.com -s {section}" for section in spec.sections)
        lines.append(f"cfurl --no-open {spec.name} example.com")
    elif spec.takes_resource:
        sample = f"my-{spec.resource_label.lower()}"
        lines.append(f"cfurl {spec.name}")
        lines.append(f"cfurl {spec.name} {sample}")
        lines.append(f"cfurl --no-open {spec.name} {sample}")
    else:
        lines.append(f"cfurl {spec.name}")
        lines.extend(f"cfurl {alias}" for alias in spec.aliases)
        lines.append(f"cfurl --no-open {spec.name}")
    return "\n".join(f"  {line}" for line in lines)


def _help(spec: CommandSpec) -> str:
    text = spec.summary
    if spec.aliases:
        text += f"\n\nAliases: {', '.join(spec.aliases)}"
    return text


def build_command(spec: CommandSpec) -> click.Command:
    """Build the Click command for one catalog entry."""
    params: list[click.Parameter] = []
    metavar = describe_arguments(spec)
    if spec.takes_zone:
        params.append(click.Argument(["zone"], required=False, metavar=metavar))
    elif spec.takes_resource:
        params.append(click.Argument(["resource"], required=False, metavar=metavar))
    if spec.sections:
        params.append(
            click.Option(
                ["-s", "--section"],
                metavar="SECTION",
                help=f"Section to open: {', '.join(spec.sections)}.",
            )
        )

    @click.pass_context
    def callback(
        ctx: click.Context,
        zone: str | None = None,
        resource: str | None = None,
        section: str | None = None,
    ) -> None:
        request = ResolvedRequest(
            zone=zone,
            resource=resource,
            section=section,
            extra=tuple(ctx.args),
        )
        open_dashboard(ctx.obj, spec.name, request)

    return CfCommand(
        name=spec.name,
        callback=callback,
        params=params,
        help=_help(spec),
        short_help=spec.summary,
        context_settings=_CONTEXT_SETTINGS,
        examples=_examples(spec),
    )


def build_unknown_command(name: str) -> click.Command:
    """Stand-in for an unrecognised command name.

    Swallows any arguments and lets the resolver report ``UNKNOWN_COMMAND``.
    """

    @click.pass_obj
    def callback(app: AppContext) -> None:
        from cfurl.services.resolver import ResolverService

        app.emit(ResolverService(app.settings).resolve(name))

    return click.Command(
        name=name,
        callback=callback,
        add_help_option=False,
        context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    )
