from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from param_normalizer.core.errors import SchemaError


class ParamType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


class StrictBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ParamSpec(StrictBaseModel):
    type: ParamType
    required: bool = False


class ValidationResult(StrictBaseModel):
    status: bool = True
    errors: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _status_follows_errors(self) -> "ValidationResult":
        self.status = not self.errors
        return self


class ParamResult(StrictBaseModel):
    processed: Dict[str, Any] = Field(default_factory=dict)
    validated: ValidationResult = Field(default_factory=ValidationResult)


class NormalizeRequest(StrictBaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    params: Dict[str, Any] = Field(default_factory=dict)
    param_schema: Dict[str, ParamSpec] = Field(alias="schema")


SchemaInput = Mapping[str, Union[ParamSpec, Mapping[str, Any]]]


def build_schema(schema: SchemaInput) -> Dict[str, ParamSpec]:
    """Validate a plain mapping of descriptors into ParamSpec models."""
    built: Dict[str, ParamSpec] = {}
    for name, spec in schema.items():
        if isinstance(spec, ParamSpec):
            built[name] = spec
            continue
        try:
            built[name] = ParamSpec.model_validate(spec)
        except ValidationError as exc:
            raise SchemaError(f"Invalid schema for param '{name}': {exc}") from exc
    return built
