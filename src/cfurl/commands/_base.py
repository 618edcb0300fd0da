"""Custom Click base classes with --examples support and alias lookup.

Provides CfCommand and CfGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
This keeps ``--help`` concise while making examples available on demand.

CfGroup also resolves command aliases from the dashboard catalog and
routes unknown command names to the resolver, so they fail with the
``UNKNOWN_COMMAND`` exit status instead of a generic usage error.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class CfCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class CfGroup(click.Group):
    """Click Group subclass with ``--examples``, aliases and unknown-command routing.

    Sets ``command_class = CfCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = CfCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        cmd = super().get_command(ctx, cmd_name)
        if cmd is not None:
            return cmd
        from cfurl.domain.catalog import get_command_spec

        spec = get_command_spec(cmd_name)
        if spec is None:
            return None
        return super().get_command(ctx, spec.name)

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = args[0]
        if (
            not ctx.resilient_parsing
            and not cmd_name.startswith("-")
            and self.get_command(ctx, cmd_name) is None
        ):
            from cfurl.commands.dashboard import build_unknown_command

            return cmd_name, build_unknown_command(cmd_name), args[1:]
        return super().resolve_command(ctx, args)
