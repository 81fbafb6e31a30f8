"""Click classes for dagctl commands that carry usage examples.

Pass ``examples="..."`` to ``@click.command(cls=DagCommand)`` (or to a
``DagGroup``) and the command gains an eager ``--examples`` flag that prints
the text and exits before any graph document is loaded. ``--help`` ends with
a one-line pointer to the flag.
"""

from __future__ import annotations

from typing import Any

import click

_EXAMPLES_HINT = "Run with --examples to see sample invocations."


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    command = ctx.command
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(getattr(command, "examples", "") or "")
    ctx.exit(0)


class _ExamplesMixin:
    """Adds the ``examples`` keyword and ``--examples`` flag to a Click class."""

    params: list[click.Parameter]
    epilog: str | None

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if not examples:
            return
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=_print_examples,
                help="Show usage examples and exit.",
            )
        )
        self.epilog = f"{self.epilog}\n\n{_EXAMPLES_HINT}" if self.epilog else _EXAMPLES_HINT


class DagCommand(_ExamplesMixin, click.Command):
    """A dagctl command that may carry usage examples."""


class DagGroup(_ExamplesMixin, click.Group):
    """A dagctl command group; its subcommands are ``DagCommand`` by default."""

    command_class = DagCommand
