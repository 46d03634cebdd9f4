# clopts — MIT Licensed
"""
Type inference and value casting for declared options.

An option's type is never declared explicitly: it is inferred from the runtime type
of its default value and identified by an `OptionType` tag. The `TypeCaster` maps
each tag to a cast function plus cardinality rules, and converts the raw string
tokens collected from the command line into a typed value.

Registered tags:
- `string`:   exactly one token, kept as is.
- `number`:   exactly one token, parsed as int or float.
- `boolean`:  zero tokens toggles the default, one token must be `true`/`false`.
- `string[]`: one or more tokens, kept as a list.
- `object`:   one or more `key:value` tokens, built into a flat mapping.

Example:
    caster = TypeCaster.default()
    caster.cast(OptionType.NUMBER, ["42"], 0)            # 42
    caster.cast(OptionType.BOOLEAN, [], True)            # False
    caster.cast(OptionType.OBJECT, ["a:1", "b:x:y"], {})  # {"a": "1", "b": "x:y"}
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from clopts.exceptions import CastError

OptionValue = str | int | float | bool | list[str] | dict[str, str]

CastFunction = Callable[[Any, Any], Any]


class OptionType(str, Enum):
    """
    Enum of the type tags an option value can carry.

    Aliases:
        - "array" → "string[]"

    Example:
        OptionType("array") → OptionType.ARRAY
    """

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "string[]"
    OBJECT = "object"

    @property
    def label(self) -> str:
        """Return the name shown in help output."""
        return "array" if self is OptionType.ARRAY else self.value

    @classmethod
    def _missing_(cls, value: object) -> OptionType:
        if isinstance(value, str) and value.strip().lower() == "array":
            return cls.ARRAY
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: {value!r}. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


def infer_option_type(value: Any) -> OptionType:
    """Return the type tag for a default value."""
    if isinstance(value, bool):
        return OptionType.BOOLEAN
    if isinstance(value, (int, float)):
        return OptionType.NUMBER
    if isinstance(value, str):
        return OptionType.STRING
    if isinstance(value, (list, tuple)):
        return OptionType.ARRAY
    if isinstance(value, dict):
        return OptionType.OBJECT
    raise CastError(f"Type '{type(value).__name__}' is undefined.")


def cast_string(arg: str, _: Any) -> str:
    return arg


def cast_number(arg: str, _: Any) -> int | float:
    """Parse a numeric literal, preferring int when the literal is integral."""
    text = arg.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        raise CastError(f"Cannot cast '{arg}' to number type.") from None
    if math.isnan(number):
        raise CastError(f"Cannot cast '{arg}' to number type.")
    return number


def cast_boolean(arg: str | None, default: Any) -> bool:
    """Toggle the default when no token was given, else parse `true`/`false`."""
    if arg is None:
        return not default
    lowered = arg.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise CastError(f"Cannot cast '{arg}' to boolean type.")


def cast_array(args: list[str], _: Any) -> list[str]:
    return list(args)


def cast_object(args: list[str], _: Any) -> dict[str, str]:
    """Build a mapping from `key:value` tokens; only the first `:` separates."""
    result: dict[str, str] = {}
    for arg in args:
        key, _, value = arg.partition(":")
        if not key:
            raise CastError(f"Cannot cast '{arg}' to object type.")
        result[key] = value
    return result


@dataclass(frozen=True)
class CastRule:
    """A registered cast function and its cardinality rules."""

    function: CastFunction
    accepts_empty: bool = False
    accepts_multiple: bool = False


class TypeCaster:
    """
    Registry mapping type tags to cast rules.

    The caster is stateless once built: `cast()` has no side effects.
    """

    def __init__(self) -> None:
        self._rules: dict[str, CastRule] = {}

    @classmethod
    def default(cls) -> TypeCaster:
        """Build a caster with the five built-in option types registered."""
        caster = cls()
        caster.register(OptionType.STRING, cast_string)
        caster.register(OptionType.NUMBER, cast_number)
        caster.register(OptionType.BOOLEAN, cast_boolean, accepts_empty=True)
        caster.register(OptionType.ARRAY, cast_array, accepts_multiple=True)
        caster.register(OptionType.OBJECT, cast_object, accepts_multiple=True)
        return caster

    @staticmethod
    def _key(tag: OptionType | str) -> str:
        return tag.value if isinstance(tag, OptionType) else tag

    def register(
        self,
        tag: OptionType | str,
        function: CastFunction,
        *,
        accepts_empty: bool = False,
        accepts_multiple: bool = False,
    ) -> TypeCaster:
        """Register or replace the cast rule for a tag."""
        self._rules[self._key(tag)] = CastRule(
            function=function,
            accepts_empty=accepts_empty,
            accepts_multiple=accepts_multiple,
        )
        return self

    def is_registered(self, tag: OptionType | str) -> bool:
        return self._key(tag) in self._rules

    def cast(self, tag: OptionType | str, tokens: list[str], default: Any) -> Any:
        """
        Convert raw tokens to a typed value.

        Multi-value tags always receive the full token list. Single-value tags
        receive the single token, or `None` when they accept an empty list.

        Args:
            tag (OptionType | str): The type tag to cast to.
            tokens (list[str]): Raw tokens from the command line.
            default (Any): The option default, used by boolean toggles.

        Raises:
            CastError: If the tag is unregistered, the number of tokens does not fit
                the tag, or a token cannot be converted.
        """
        rule = self._rules.get(self._key(tag))
        if rule is None:
            raise CastError(f"Type '{self._key(tag)}' is undefined.")

        if len(tokens) > 1 and not rule.accepts_multiple:
            raise CastError(f"Multiple arguments '[{', '.join(tokens)}]' were specified.")
        if not tokens and not rule.accepts_empty:
            raise CastError("Nothing is assigned to the argument to convert.")

        if rule.accepts_multiple:
            arg: Any = list(tokens)
        elif tokens:
            arg = tokens[0]
        else:
            arg = None
        return rule.function(arg, default)
