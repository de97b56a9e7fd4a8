"""Schema Boundary — the contract envgate needs from a schema, plus the pydantic adapter.

Invariants:
    - The pipeline only ever calls field_names() and validate() on a schema
    - A field's environment variable name is its validation_alias, else its alias,
      else its field name; AliasChoices fields read every choice and report the first
    - validate() never raises for bad values: rejections come back as Failure
    - Absent variables are simply missing from `raw`; "" is a real value

Design Decisions:
    - Protocol over ABC: any object with the two methods is a schema (structural typing)
    - pydantic BaseModel as the shipped schema language: typed coercion, Literal
      enums and rich per-field errors without owning a schema DSL
    - define_schema() wraps create_model so callers can declare a schema inline
"""

from typing import Any, Mapping, Protocol, runtime_checkable

from pydantic import AliasChoices, BaseModel, ValidationError, create_model
from pydantic.fields import FieldInfo

from envgate.core.domain_types import EnvScope
from envgate.core.validation_result import (
    Failure, FieldIssue, Success, ValidationResult,
)

# loc placeholder for model-level (non-field) validator errors
MODEL_LEVEL_LOC = "<schema>"


@runtime_checkable
class EnvSchema(Protocol):
    """Structural contract for anything that can validate an environment subset."""
    def field_names(self) -> tuple[str, ...]: ...
    def validate(
        self, raw: Mapping[str, str], scope: EnvScope,
    ) -> ValidationResult: ...


class PydanticEnvSchema:
    """Adapts a pydantic model class to the EnvSchema contract."""

    def __init__(self, model: type[BaseModel]):
        self.model = model
        # model attribute name -> every env var name it reads, primary first
        self._env_names: dict[str, tuple[str, ...]] = {
            name: _env_names(name, info)
            for name, info in model.model_fields.items()
        }

    def __repr__(self) -> str:
        return f"PydanticEnvSchema({self.model.__name__})"

    def field_names(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(
            env_name
            for names in self._env_names.values()
            for env_name in names
        ))

    def validate(
        self, raw: Mapping[str, str], scope: EnvScope,
    ) -> ValidationResult:
        try:
            instance = self.model.model_validate(dict(raw))
        except ValidationError as exc:
            return Failure(tuple(
                _issue_from_error(err, scope) for err in exc.errors()
            ))
        return Success({
            names[0]: getattr(instance, attr)
            for attr, names in self._env_names.items()
        })


def _env_names(name: str, info: FieldInfo) -> tuple[str, ...]:
    """Env var names a field is read from; the first one keys the validated value."""
    alias = info.validation_alias if info.validation_alias is not None else info.alias
    if alias is None:
        return (name,)
    if isinstance(alias, str):
        return (alias,)
    if isinstance(alias, AliasChoices) and all(
        isinstance(choice, str) for choice in alias.choices
    ):
        return tuple(alias.choices)
    raise TypeError(
        f"Field '{name}' uses an AliasPath: environment variables are flat "
        f"names, use a str alias or AliasChoices of str",
    )


def _issue_from_error(err: dict, scope: EnvScope) -> FieldIssue:
    """Map one pydantic error dict to a FieldIssue."""
    loc = err.get("loc") or ()
    variable = str(loc[0]) if loc else MODEL_LEVEL_LOC
    return FieldIssue(
        variable=variable,
        message=err["msg"],
        scope=scope,
        error_type=err.get("type", "value_error"),
    )


def define_schema(name: str = "EnvSchema", /, **fields: Any) -> PydanticEnvSchema:
    """Declare a schema inline: define_schema("Server", NODE_ENV=Literal["dev", "prod"]).

    A bare annotation means the variable is required. Pass a (type, default)
    tuple for optional variables, e.g. LOG_LEVEL=(str, "INFO").
    """
    definitions = {
        field_name: spec if isinstance(spec, tuple) else (spec, ...)
        for field_name, spec in fields.items()
    }
    return PydanticEnvSchema(create_model(name, **definitions))


def as_schema(obj: Any) -> EnvSchema:
    """Coerce the accepted schema shapes into an EnvSchema.

    Accepts an EnvSchema, a pydantic model class, a mapping of field
    definitions (as for define_schema), or None for an empty schema.
    """
    if obj is None:
        return define_schema("EmptyEnvSchema")
    if isinstance(obj, type) and issubclass(obj, BaseModel):
        return PydanticEnvSchema(obj)
    if isinstance(obj, Mapping):
        return define_schema("InlineEnvSchema", **dict(obj))
    if isinstance(obj, EnvSchema):
        return obj
    raise TypeError(
        f"Unsupported schema type {type(obj).__name__}: expected a pydantic "
        f"model class, a mapping of field definitions, or an EnvSchema",
    )
