# clopts — MIT Licensed
"""
Holds the declared options and owns short-alias assignment and name resolution.

The `OptionRegistry` is built once from the user declaration map:

1. `help` (`-h`) and `version` (`-v`) are injected unless the user declares them.
2. Each declaration is normalized into an `OptionSpec` (see `clopts.option`).
3. Specs are sorted by name and indexed; positional entry ordinals are reserved
   in an ordinal table, rejecting duplicates.

`assign_short_aliases()` then resolves every short alias left unresolved by the
declarations. It walks options in name order and gives each one the shortest
free prefix of its name, so the result depends on which names are declared.
"""
from __future__ import annotations

from typing import Any, Iterator, Mapping

from clopts.exceptions import NameResolutionError, RegistrationError
from clopts.logger import logger
from clopts.option import OptionSpec, ShortAlias

DEFAULT_DECLARATIONS: dict[str, dict[str, Any]] = {
    "help": {"short": "h", "description": "Print this message."},
    "version": {"short": "v", "description": "Print the project version."},
}


class OptionRegistry:
    """Declared options indexed by name, plus the positional entry table."""

    def __init__(self, declarations: Mapping[str, Any]) -> None:
        self._specs: dict[str, OptionSpec] = {}
        self._entries: list[str | None] = []

        merged: dict[str, Any] = {**DEFAULT_DECLARATIONS, **declarations}
        invalid = [repr(name) for name in merged if not isinstance(name, str) or not name]
        if invalid:
            raise RegistrationError(
                f"Option names must be non-empty strings: {', '.join(invalid)}."
            )

        for name in sorted(merged):
            spec = OptionSpec.from_declaration(name, merged[name])
            if spec.entry is not None:
                self._reserve_entry(name, spec.entry)
            self._specs[name] = spec
            logger.debug("Registered option '%s' (%s).", name, spec.option_type)

    def _reserve_entry(self, name: str, entry: int) -> None:
        index = entry - 1
        if index < len(self._entries) and self._entries[index] is not None:
            raise RegistrationError(
                f"The entry number '{entry}' has already been created "
                f"by '{self._entries[index]}'."
            )
        if index >= len(self._entries):
            self._entries.extend([None] * (index + 1 - len(self._entries)))
        self._entries[index] = name

    @property
    def entries(self) -> list[str | None]:
        """Option names by entry ordinal; unoccupied ordinals are None."""
        return list(self._entries)

    def names(self) -> list[str]:
        return list(self._specs)

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._specs.values())

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def get(self, name: str) -> OptionSpec:
        """Return the spec for an option name."""
        spec = self._specs.get(name)
        if spec is None:
            raise NameResolutionError(f"'{name}' is an invalid option name.")
        return spec

    def assign_short_aliases(self) -> None:
        """
        Validate explicit short aliases and resolve the unresolved ones.

        Raises:
            RegistrationError: If two options share an explicit short alias, or an
                explicit short alias equals another option's name.
        """
        explicit = [spec.short for spec in self if spec.short]
        shorts: list[str] = []
        duplicates: list[str] = []
        for short in explicit:
            if short in shorts:
                if short not in duplicates:
                    duplicates.append(short)
            else:
                shorts.append(short)
        if duplicates:
            raise RegistrationError(
                f"Duplicate value '{', '.join(duplicates)}' for short option."
            )

        colliding = [
            spec.name
            for spec in self
            if any(other.short == spec.name for other in self if other is not spec)
        ]
        if colliding:
            raise RegistrationError(
                f"Short option value '{', '.join(colliding)}' duplicates option name."
            )

        for spec in self:
            if spec.short_alias.is_resolved:
                continue
            spec.short_alias = self._first_free_prefix(spec.name, shorts)
            if spec.short_alias:
                shorts.append(spec.short_alias.value)
            logger.debug("Short alias for '%s': %s", spec.name, spec.short_alias)

    def _first_free_prefix(self, name: str, shorts: list[str]) -> ShortAlias:
        prefix = ""
        for char in name:
            prefix += char
            if prefix == name:
                break
            if prefix in shorts or prefix in self._specs:
                continue
            return ShortAlias.assigned(prefix)
        return ShortAlias.none()

    def string_to_option_name(self, key: str) -> str:
        """
        Convert a command-line token into an option name.

        `-x` is looked up as a short alias; any other token has a leading `--`
        removed and is looked up as a full option name.

        Raises:
            NameResolutionError: If the token matches no option.
        """
        if len(key) > 1 and key[0] == "-" and key[1] != "-":
            short = key[1:]
            for spec in self:
                if spec.short == short:
                    return spec.name
        else:
            name = key[2:] if key.startswith("--") else key
            if name in self._specs:
                return name

        raise NameResolutionError(f"Unknown command options '{key}'.")

    def search(self, *keywords: str) -> list[str]:
        """
        Return names of options matching every keyword.

        A keyword matches when it is a substring of the option name, its short
        alias or its description.
        """
        result = []
        for spec in self:
            if all(
                keyword in spec.name
                or (spec.short and keyword in spec.short)
                or (spec.description and keyword in spec.description)
                for keyword in keywords
            ):
                result.append(spec.name)
        return result
