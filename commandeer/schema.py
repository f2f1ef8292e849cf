# Commandeer CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Pydantic models for the loosely-typed program schemas accepted at the API boundary.

Program schemas are plain mappings, e.g.:

    {
        "command": "connect <resourceName>",
        "description": "Connect to a resource",
        "version": "0.5.1",
        "requiredOptions": [["-p, --password <pwd>", "The password to connect"]],
        "options": [
            ["-d, --domain-name <name>", "A domain name of the resource"],
            ["-n, --user-name [name]", "A user name to log in", "Tuckn"],
        ],
        "action": connect,
    }

Option rows come in a positional form,
`[flag_schema, description?, transform_or_default?, default_if_transform_given?]`,
or a mapping form with `flag`, `description`, `transform` and `default` keys.
Both are parsed once into an `OptionRow` so the positional shape never travels
past the compiler. Validation failures are raised as the matching `SchemaError`.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from commandeer.exceptions import (
    InvalidCommandSchemaError,
    InvalidHelpSchemaError,
    InvalidOptionSchemaError,
    InvalidVersionSchemaError,
    SchemaError,
)


class OptionRow(BaseModel):
    """
    A single option declaration.

    Attributes:
        flag (str): The flag schema, e.g. `"-f, --file <path>"`.
        description (str): Help text.
        transform (Callable | None): `(raw_token, previous_value) -> new_value`.
        default (Any): Initial value of the option.
        has_default (bool): True when `default` was given, even if it is None.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid", frozen=True)

    flag: str
    description: str = ""
    transform: Callable[[Any, Any], Any] | None = None
    default: Any = None
    has_default: bool = False

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, value: Any) -> Any:
        return "" if value is None else value

    @classmethod
    def from_row(cls, row: Any) -> OptionRow:
        """Build an `OptionRow` from the positional, mapping or model form."""
        if isinstance(row, OptionRow):
            return row
        try:
            if isinstance(row, Mapping):
                data = dict(row)
                data.setdefault("has_default", "default" in row)
                return cls(**data)
            if isinstance(row, (list, tuple)):
                return cls(**cls._from_sequence(row))
        except ValidationError as error:
            raise InvalidOptionSchemaError(
                f"Invalid option row {row!r}: {error}"
            ) from error
        raise InvalidOptionSchemaError(
            f"Option row must be a list, tuple or mapping, got {row!r}"
        )

    @staticmethod
    def _from_sequence(row: list[Any] | tuple[Any, ...]) -> dict[str, Any]:
        if not row:
            raise InvalidOptionSchemaError("Option row must not be empty")
        data: dict[str, Any] = {"flag": row[0]}
        if len(row) > 1:
            data["description"] = row[1]
        if len(row) > 2:
            if callable(row[2]):
                data["transform"] = row[2]
                if len(row) > 3:
                    data["default"] = row[3]
                    data["has_default"] = True
            else:
                data["default"] = row[2]
                data["has_default"] = True
        return data


class ProgramSchema(BaseModel):
    """
    The declaration of one program (command) before compilation.

    Both camelCase keys (`requiredOptions`, `helpOption`) and snake_case field
    names (`required_options`, `help_option`) are accepted.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        extra="forbid",
        populate_by_name=True,
    )

    command: str | None = ""
    description: str = ""
    version: str | list[Any] | tuple[Any, ...] | None = None
    options: list[OptionRow] = Field(default_factory=list)
    required_options: list[OptionRow] = Field(
        default_factory=list, alias="requiredOptions"
    )
    action: Callable[..., Any] | None = None
    help_option: list[Any] | tuple[Any, ...] | None = Field(
        default=None, alias="helpOption"
    )

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("options", "required_options", mode="before")
    @classmethod
    def validate_rows(cls, value: Any) -> list[OptionRow]:
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            raise InvalidOptionSchemaError(
                f"Options must be a list of option rows, got {value!r}"
            )
        return [OptionRow.from_row(row) for row in value]

    @classmethod
    def from_schema(cls, schema: Any) -> ProgramSchema:
        """Validate a mapping (or pass through a model) into a `ProgramSchema`."""
        if isinstance(schema, ProgramSchema):
            return schema
        if not isinstance(schema, Mapping):
            raise SchemaError(f"Program schema must be a mapping, got {schema!r}")
        try:
            return cls.model_validate(dict(schema))
        except ValidationError as error:
            raise _schema_error_from(error) from error


_FIELD_ERRORS: dict[str, type[SchemaError]] = {
    "command": InvalidCommandSchemaError,
    "options": InvalidOptionSchemaError,
    "required_options": InvalidOptionSchemaError,
    "requiredOptions": InvalidOptionSchemaError,
    "version": InvalidVersionSchemaError,
    "help_option": InvalidHelpSchemaError,
    "helpOption": InvalidHelpSchemaError,
}


def _schema_error_from(error: ValidationError) -> SchemaError:
    details = error.errors()
    location = details[0]["loc"] if details else ()
    field_name = str(location[0]) if location else ""
    error_type = _FIELD_ERRORS.get(field_name, SchemaError)
    return error_type(f"Invalid program schema field '{field_name}': {error}")
