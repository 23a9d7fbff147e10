"""Click command class carrying a block of usage examples.

``--help`` stays short; ``--examples`` prints the block and exits.
"""

from __future__ import annotations

from typing import Any

import click


class SlideGridCommand(click.Command):
    """Command with optional ``examples`` text exposed through ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self._examples_option: click.Option | None = None
        if examples:
            self._examples_option = click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=self._print_examples,
                help="Show usage examples.",
            )

    def get_params(self, ctx: click.Context) -> list[click.Parameter]:
        params = super().get_params(ctx)
        if self._examples_option is not None:
            params.append(self._examples_option)
        return params

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)
