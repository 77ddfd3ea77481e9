"""Click base classes for wgraph commands.

``examples=`` adds an eager ``--examples`` flag so ``--help`` stays short.
``signed_args=True`` lets positional numbers start with ``-`` (node keys and
edge weights); click would otherwise parse ``-3`` as an unknown short option.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(getattr(ctx.command, "examples", ""))
    ctx.exit(0)


def _examples_option() -> click.Option:
    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_print_examples,
        help="Show usage examples.",
    )


class WGraphCommand(click.Command):
    """Command with optional ``--examples`` and signed positional numbers."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        signed_args: bool = False,
        **kwargs: Any,
    ) -> None:
        if signed_args:
            kwargs["context_settings"] = {
                **(kwargs.get("context_settings") or {}),
                "ignore_unknown_options": True,
            }
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option())


class WGraphGroup(click.Group):
    """Group whose subcommands default to :class:`WGraphCommand`."""

    command_class = WGraphCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option())
