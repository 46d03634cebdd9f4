# clopts — MIT Licensed
"""
Option declaration and specification models.

Users declare options as a mapping from option name to either a bare description
string or a partial declaration. Each declaration is validated with the pydantic
`OptionDeclaration` model and turned into an `OptionSpec`, the record the registry
and resolver work with.

Key Attributes of an `OptionSpec`:
- `name`: Unique, case-sensitive option name (`--name` on the command line)
- `value`: Default value; its runtime type fixes the option type
- `short_alias`: Three-state short alias (unresolved, none, or assigned)
- `required`: Whether the option must be given on the command line
- `entry`: 1-based ordinal of the leading positional argument bound to it
- `description`: Help text
"""
from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from clopts.exceptions import RegistrationError
from clopts.type_caster import OptionType, OptionValue, infer_option_type


class OptionDeclaration(BaseModel):
    """Validated form of a single user option declaration."""

    model_config = ConfigDict(extra="forbid")

    value: (
        StrictBool
        | StrictInt
        | StrictFloat
        | StrictStr
        | list[StrictStr]
        | dict[StrictStr, StrictStr]
    ) = False
    short: StrictStr | None = None
    required: StrictBool = False
    entry: StrictInt | None = None
    description: StrictStr = ""

    @field_validator("short")
    @classmethod
    def validate_short(cls, value: str | None) -> str | None:
        if value is None:
            return value
        if not value or value.startswith("-") or any(char.isspace() for char in value):
            raise ValueError(
                "short must be a non-empty string without whitespace or leading '-'"
            )
        return value

    @field_validator("entry")
    @classmethod
    def validate_entry(cls, value: int | None) -> int | None:
        if value is not None and value < 1:
            raise ValueError("entry must be a positive integer")
        return value

    @property
    def short_given(self) -> bool:
        """True if `short` was set explicitly, including to `None`."""
        return "short" in self.model_fields_set

    @property
    def required_given(self) -> bool:
        return "required" in self.model_fields_set


class ShortState(Enum):
    """Resolution state of an option's short alias."""

    UNRESOLVED = "unresolved"
    NONE = "none"
    ASSIGNED = "assigned"


@dataclass(frozen=True)
class ShortAlias:
    """
    Short alias of an option.

    `UNRESOLVED` aliases only exist until the registry runs its assignment pass;
    afterwards every alias is either `NONE` or `ASSIGNED` with a value.
    """

    state: ShortState
    value: str | None = None

    @classmethod
    def unresolved(cls) -> ShortAlias:
        return cls(ShortState.UNRESOLVED)

    @classmethod
    def none(cls) -> ShortAlias:
        return cls(ShortState.NONE)

    @classmethod
    def assigned(cls, value: str) -> ShortAlias:
        return cls(ShortState.ASSIGNED, value)

    @property
    def is_resolved(self) -> bool:
        return self.state is not ShortState.UNRESOLVED

    def __bool__(self) -> bool:
        return self.state is ShortState.ASSIGNED

    def __str__(self) -> str:
        return self.value or ""


@dataclass
class OptionSpec:
    """A declared option as held by the `OptionRegistry`."""

    name: str
    value: OptionValue
    short_alias: ShortAlias
    required: bool = False
    entry: int | None = None
    description: str = ""

    @property
    def short(self) -> str | None:
        """The assigned short alias, or None."""
        return self.short_alias.value if self.short_alias else None

    @property
    def option_type(self) -> OptionType:
        return infer_option_type(self.value)

    @classmethod
    def from_declaration(cls, name: str, raw: Any) -> OptionSpec:
        """
        Normalize and validate one user declaration.

        A bare string is treated as the description. When `entry` is set and
        `required` was not given, the option becomes required.

        Raises:
            RegistrationError: If the declaration is malformed.
        """
        if isinstance(raw, str):
            raw = {"description": raw}
        elif raw is None:
            raw = {}
        elif not isinstance(raw, Mapping):
            raise RegistrationError(
                f"The declaration of option '{name}' must be a string or a mapping."
            )

        try:
            declaration = OptionDeclaration(**dict(raw))
        except PydanticValidationError as error:
            details = "; ".join(
                f"{'.'.join(str(loc) for loc in item['loc'])}: {item['msg']}"
                for item in error.errors()
            )
            raise RegistrationError(
                f"Invalid declaration for option '{name}': {details}"
            ) from None

        required = declaration.required
        if declaration.entry is not None and not declaration.required_given:
            required = True

        if declaration.short_given:
            short_alias = (
                ShortAlias.assigned(declaration.short)
                if declaration.short is not None
                else ShortAlias.none()
            )
        else:
            short_alias = ShortAlias.unresolved()

        return cls(
            name=name,
            value=deepcopy(declaration.value),
            short_alias=short_alias,
            required=required,
            entry=declaration.entry,
            description=declaration.description,
        )
