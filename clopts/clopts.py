# clopts — MIT Licensed
"""
Defines `ClOpts`, the resolver that turns option declarations, command-line tokens
and configuration files into one merged value per option.

Construction runs the whole resolution pass:

1. Build the `TypeCaster` and the `OptionRegistry`, then assign short aliases.
2. Bind leading positional tokens to options declared with an `entry` ordinal.
3. Bind every flag token (`-x`, `--name`) and its values to its option.
4. Render help or version if requested (one-shot latches).
5. Check that every required option was given on the command line.

Values live in three tiers consulted in fixed precedence: the declared default
(`options`), configuration files (`file_options`), and the command line
(`command_options`). `get()` and `get_all()` select which tiers take part.

Errors are raised, never turned into an exit: `parse_or_exit()` is the fail-fast
entry point for command-line programs.

Example:
    clopts = ClOpts(
        {
            "message": {"value": "Hello World.", "entry": 1, "required": False},
            "port": {"value": 3000, "description": "Port to listen on."},
        },
        ["hi", "--port", "8080"],
    ).set_config_file("serve.json")

    clopts.get("port")                     # 8080
    clopts.get("port", {"command": False})  # value from serve.json, or 3000
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from rich.console import Console
from rich.markup import escape

from clopts.config import load_config_file
from clopts.console import console as default_console
from clopts.exceptions import (
    BindingError,
    ClOptsError,
    NameResolutionError,
    RegistrationError,
    ValidationError,
)
from clopts.help import HelpRenderer, VersionProvider
from clopts.logger import logger
from clopts.option import OptionSpec
from clopts.registry import OptionRegistry
from clopts.signals import HelpSignal, VersionSignal
from clopts.themes import OneColors
from clopts.tokens import TokenizedInput, tokenize
from clopts.type_caster import OptionValue, TypeCaster
from clopts.utils import get_program_name


@dataclass(frozen=True)
class Tiers:
    """Which value tiers `ClOpts.get()` consults on top of the default."""

    file: bool = False
    command: bool = False

    @classmethod
    def coerce(cls, tiers: bool | Tiers | Mapping[str, bool]) -> Tiers:
        if isinstance(tiers, Tiers):
            return tiers
        if isinstance(tiers, bool):
            return cls(file=tiers, command=tiers)
        unknown = set(tiers) - {"file", "command"}
        if unknown:
            raise ValueError(f"Unknown tiers: {', '.join(sorted(unknown))}")
        return cls(
            file=bool(tiers.get("file", False)),
            command=bool(tiers.get("command", False)),
        )


class ClOpts:
    """
    Resolves declared options against command-line tokens and config files.

    Args:
        declarations (Mapping[str, Any]): Option name to a description string or a
            partial declaration `{value, short, required, entry, description}`.
        argv (TokenizedInput | Sequence[str] | None): Pre-tokenized input, raw
            arguments to tokenize, or None to use `sys.argv[1:]`.
        command (str | None): Program name shown in usage. Defaults to the stem
            of `sys.argv[0]`.
        show_type (bool): Show the type column in option rows.
        show_default (bool): Show defaults of optional options.
        console (Console | None): Output console. Defaults to the clopts console.
        version (str | Callable[[], str | None] | None): Version string or provider.

    Raises:
        RegistrationError: If declarations conflict.
        CastError: If a command-line value does not fit its option type.
        BindingError: If there are surplus positional tokens or unknown flags.
        ValidationError: If required options are missing.
        HelpSignal: After rendering help requested on the command line.
        VersionSignal: After rendering the version requested on the command line.
    """

    def __init__(
        self,
        declarations: Mapping[str, Any],
        argv: TokenizedInput | Sequence[str] | None = None,
        *,
        command: str | None = None,
        show_type: bool = True,
        show_default: bool = True,
        console: Console | None = None,
        version: str | VersionProvider | None = None,
    ) -> None:
        self.console: Console = console or default_console
        self.argv: TokenizedInput = (
            argv if isinstance(argv, TokenizedInput) else tokenize(argv)
        )
        self._type_caster = TypeCaster.default()
        self._registry = OptionRegistry(declarations)
        self.help_renderer = HelpRenderer(
            self._registry,
            self.console,
            command=command or get_program_name(),
            show_type=show_type,
            show_default=show_default,
            version=version,
        )
        self._needs_show_help = True
        self._needs_show_version = True

        self.options: Mapping[str, OptionValue] = MappingProxyType(
            {spec.name: spec.value for spec in self._registry}
        )
        self.file_options: dict[str, Any] = {}
        self.command_options: dict[str, Any] = {}

        self._registry.assign_short_aliases()
        self._set_entries()
        self._set_argv()
        self._run_if_needed()
        self._check_required()

    @property
    def registry(self) -> OptionRegistry:
        return self._registry

    def _set_entries(self) -> None:
        names = self._registry.entries
        entries = self.argv.entries
        if len(names) < len(entries):
            surplus = entries[len(names) :]
            raise BindingError(
                f"The '{', '.join(surplus)}' arguments is exceeded. "
                "Argv has too many arguments."
            )

        index = 0
        for name in names:
            if name is None:
                continue
            if index >= len(entries):
                continue
            spec = self._registry.get(name)
            self.command_options[name] = self._type_caster.cast(
                spec.option_type, [entries[index]], spec.value
            )
            logger.debug("Bound entry %d to '%s'.", index + 1, name)
            index += 1

    def _set_argv(self) -> None:
        unknown_options: list[str] = []
        for key, tokens in self.argv.options.items():
            try:
                name = self._registry.string_to_option_name(key)
            except NameResolutionError:
                unknown_options.append(key)
                continue

            spec = self._registry.get(name)
            self.command_options[name] = self._type_caster.cast(
                spec.option_type, tokens, spec.value
            )
            logger.debug("Bound '%s' to '%s'.", key, name)

        if unknown_options:
            raise BindingError(
                f"'{', '.join(unknown_options)}' is an invalid option name."
            )

    def _check_required(self) -> None:
        missing = [
            spec.name
            for spec in self._registry
            if spec.required and spec.name not in self.command_options
        ]
        if missing:
            raise ValidationError(
                f"'{', '.join(missing)}' must be declared from the command line."
            )

    def _run_if_needed(self, tiers: bool | Tiers | Mapping[str, bool] = True) -> None:
        if self._needs_show_help and self.get("help", tiers):
            self._needs_show_help = False
            self.show_help()
            if "help" in self.command_options:
                raise HelpSignal()

        if self._needs_show_version and self.get("version", tiers):
            self._needs_show_version = False
            self.show_version()
            if "version" in self.command_options:
                raise VersionSignal()

    def show_help(self) -> ClOpts:
        """
        Render usage and options.

        Options are limited to those given on the command line plus the search hits
        for every flag's value tokens; all options are shown when that leaves none.
        A rendering error is printed as the last line instead of being raised.
        """
        show_names = [name for name in self.command_options if name != "help"]
        for keywords in self.argv.options.values():
            if not keywords:
                continue
            hits = self.search(*keywords)
            if not hits:
                logger.warning("Options unknown for keyword '%s'.", " ".join(keywords))
                self.console.print(
                    f"[{OneColors.LIGHT_YELLOW}]Options unknown. The searched keyword "
                    f"is '{escape(' '.join(keywords))}'[/]"
                )
            for hit in hits:
                if hit not in show_names:
                    show_names.append(hit)

        try:
            self.show_usage()
            self.console.print()
            self.show_options(*show_names)
        except ClOptsError as error:
            self.console.print(f"[{OneColors.DARK_RED}]{escape(str(error))}[/]")
        return self

    def show_usage(self) -> ClOpts:
        self.help_renderer.show_usage()
        return self

    def show_options(self, *names: str) -> ClOpts:
        self.help_renderer.show_options(*names)
        return self

    def show_version(self) -> ClOpts:
        self.help_renderer.show_version()
        return self

    def get_options(self, name: str) -> OptionSpec:
        """Return the declared spec of an option."""
        return self._registry.get(name)

    def search(self, *keywords: str) -> list[str]:
        """Return option names whose name, short alias or description match all keywords."""
        return self._registry.search(*keywords)

    def string_to_option_name(self, key: str) -> str:
        return self._registry.string_to_option_name(key)

    def get(self, name: str, tiers: bool | Tiers | Mapping[str, bool] = True) -> Any:
        """
        Get the value of an option.

        The declared default is overridden by the file tier, which is overridden by
        the command-line tier, each only when enabled by `tiers`.

        Args:
            name (str): The option name.
            tiers (bool | Tiers | Mapping[str, bool]): True/False enables/disables
                both tiers; a `Tiers` or a mapping with `file`/`command` keys picks
                them individually (missing keys are False).

        Raises:
            NameResolutionError: If the option is not declared.
        """
        selected = Tiers.coerce(tiers)
        value = self._registry.get(name).value
        if selected.file and name in self.file_options:
            value = self.file_options[name]
        if selected.command and name in self.command_options:
            value = self.command_options[name]
        return value

    def get_all(self, tiers: bool | Tiers | Mapping[str, bool] = True) -> dict[str, Any]:
        """Get the values of all options, including `help` and `version`."""
        return {name: self.get(name, tiers) for name in self._registry.names()}

    def set_config_file(self, *files: str) -> ClOpts:
        """
        Load option values from configuration files.

        Files are merged in order, later files overriding earlier ones. Missing
        files are skipped. Afterwards help/version is rendered if a file enabled it.

        Raises:
            RegistrationError: If a file holds a key that is not a declared option.
            ConfigFileError: If a file cannot be read as a mapping.
        """
        for file in files:
            options = load_config_file(file)
            if options is None:
                continue
            for key in options:
                if key not in self._registry:
                    raise RegistrationError(
                        f"The '{key}' option in the '{file}' file is an invalid "
                        "option name."
                    )
            self.file_options.update(options)

        self._run_if_needed(Tiers(file=True))
        return self

    def __str__(self) -> str:
        return f"ClOpts(command='{self.help_renderer.command}', options={len(self._registry)})"

    def __repr__(self) -> str:
        return str(self)


def parse_or_exit(
    declarations: Mapping[str, Any],
    argv: TokenizedInput | Sequence[str] | None = None,
    **kwargs: Any,
) -> ClOpts:
    """
    Build a `ClOpts`, exiting the process instead of raising.

    Exits with status 0 after help or version requested on the command line, and
    with status 1 after printing the message of any resolution error.
    """
    output: Console = kwargs.get("console") or default_console
    try:
        return ClOpts(declarations, argv, **kwargs)
    except (HelpSignal, VersionSignal):
        sys.exit(0)
    except ClOptsError as error:
        logger.error("Option resolution failed: %s", error)
        output.print(f"[{OneColors.DARK_RED}]{escape(str(error))}[/]")
        sys.exit(1)
