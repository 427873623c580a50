from typing import Any, Dict, Iterable, List

import click


class FlagSet:
    """
    Flag schema for a generator, declared as click options.
    Parses `--key=value` strings the same way the CLI parses its own options.
    """

    def __init__(self, name: str, options: List[click.Option]):
        self.name = name
        self._command = click.Command(
            name, params=options, add_help_option=False)
        self.values: Dict[str, Any] = self._parse([])

    def _parse(self, args: Iterable[str]) -> Dict[str, Any]:
        ctx = self._command.make_context(self.name, list(args))
        return dict(ctx.params)

    def parse(self, args: Iterable[str]) -> None:
        """
        Replaces current values with defaults overridden by `args`.
        Raises click.ClickException (usually click.UsageError) on unknown
        flags, bad values or stray positional arguments.
        """
        self.values = self._parse(args)

    def __getitem__(self, key: str) -> Any:
        return self.values[key]
