"""Custom Click base classes with --examples support.

``--help`` stays concise; ``--examples`` prints usage examples on demand
and exits.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
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


class GigCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class GigGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Subcommands default to :class:`GigCommand`, so they accept
    ``examples=`` without an explicit ``cls=``.
    """

    command_class = GigCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


sender_option = click.option(
    "--sender",
    envvar="GIGLEDGER_SENDER",
    required=True,
    help="Caller identity (wallet). Also read from GIGLEDGER_SENDER.",
)


class NumberParamType(click.ParamType):
    """An int when the text is integral, a float otherwise."""

    name = "number"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> int | float:
        if isinstance(value, (int, float)):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            self.fail(f"{value!r} is not a number.", param, ctx)


NUMBER = NumberParamType()
