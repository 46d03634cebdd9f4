# clopts — MIT Licensed
"""
Usage, options and version rendering for a set of declared options.

`HelpRenderer` only reads from the `OptionRegistry`; it never changes option state.
Output goes to a Rich `Console`, so callers and tests can redirect it by passing
their own console.

Example output:
    Usage:
      serve [message] <options>

    Options:
      --help    -h boolean Print this message. (default: false)
      --message -m string  Text to serve.
      --port    -p number  Port to listen on. (default: 3000)
"""
from __future__ import annotations

from typing import Callable

from rich.console import Console
from rich.markup import escape

from clopts.paint import paint_value
from clopts.registry import OptionRegistry
from clopts.themes import OneColors

VersionProvider = Callable[[], str | None]


class HelpRenderer:
    """Renders usage, option tables and the version to a Rich console."""

    def __init__(
        self,
        registry: OptionRegistry,
        console: Console,
        command: str,
        show_type: bool = True,
        show_default: bool = True,
        version: str | VersionProvider | None = None,
    ) -> None:
        self.registry = registry
        self.console = console
        self.command = command
        self.show_type = show_type
        self.show_default = show_default
        self.version = version

    def get_version(self) -> str | None:
        if callable(self.version):
            return self.version()
        return self.version

    def get_usage(self, plain_text: bool = False) -> str:
        """Return the usage line: command, bracketed entries, then `<options>`."""
        parts = [self.command if plain_text else escape(self.command)]
        entries = [f"[{name}]" for name in self.registry.entries if name is not None]
        if entries:
            text = " ".join(entries)
            parts.append(text if plain_text else f"[{OneColors.GREEN}]{escape(text)}[/]")
        parts.append("<options>" if plain_text else f"[{OneColors.BLUE}]<options>[/]")
        return " ".join(parts)

    def show_usage(self) -> None:
        self.console.print("Usage:")
        self.console.print(f"  {self.get_usage()}")

    def show_options(self, *names: str) -> None:
        """
        Print one aligned row per option.

        Args:
            *names (str): Option names or flag tokens to show. All options are
                shown when none are given.

        Raises:
            NameResolutionError: If a name does not match a declared option.
        """
        if names:
            show_names = [self.registry.string_to_option_name(name) for name in names]
        else:
            show_names = self.registry.names()
        specs = [self.registry.get(name) for name in show_names]

        self.console.print("Options:")
        if not specs:
            return

        rows = [
            (
                f"--{spec.name}",
                f"-{spec.short}" if spec.short else "",
                spec.option_type.label,
                spec,
            )
            for spec in specs
        ]
        name_width = max(len(row[0]) for row in rows)
        short_width = max(len(row[1]) for row in rows)
        type_width = max(len(row[2]) for row in rows)

        for flag, short, type_label, spec in rows:
            line = (
                f"  [{OneColors.BLUE}]{escape(flag.ljust(name_width))}[/]"
                f" [{OneColors.BLUE}]{escape(short.ljust(short_width))}[/]"
            )
            if self.show_type:
                line += f" [{OneColors.GREEN}]{type_label.ljust(type_width)}[/]"
            line += f" {escape(spec.description)}"
            if self.show_default and not spec.required:
                line += (
                    f" [{OneColors.BLUE}](default:[/] {paint_value(spec.value)}"
                    f"[{OneColors.BLUE}])[/]"
                )
            self.console.print(line, highlight=False)

    def show_version(self) -> None:
        version = self.get_version()
        if version:
            self.console.print(f"version: {paint_value(version)}", highlight=False)
        else:
            self.console.print("version is undefined.")
