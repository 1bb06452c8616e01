from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional

from param_normalizer.domain.schema import (
    ParamResult,
    ParamSpec,
    ParamType,
    SchemaInput,
    ValidationResult,
    build_schema,
)
from param_normalizer.domain.validate import check_required
from param_normalizer.domain.values import (
    is_empty_like,
    is_number,
    parse_json,
    to_js_string,
    to_number,
)

# Coercers write into `processed` (or leave the field unset) and append errors.
_Coercer = Callable[[str, Any, Dict[str, Any], List[str]], None]


def process_params(
    params: Optional[Mapping[str, Any]], schema: SchemaInput
) -> ParamResult:
    """
    Normalize params to the types declared in schema and validate them.

    Never raises for any params: every problem is reported in
    result.validated.errors. Coercion errors come first, in params order,
    followed by required-field errors, in schema order.
    """
    specs = build_schema(schema)
    processed: Dict[str, Any] = {}
    errors: List[str] = []

    if params:
        normalize_params(params, specs, processed, errors)

    errors.extend(check_required(processed, specs))

    return ParamResult(
        processed=processed,
        validated=ValidationResult(errors=errors),
    )


def normalize_params(
    params: Mapping[str, Any],
    specs: Mapping[str, ParamSpec],
    processed: Dict[str, Any],
    errors: List[str],
) -> None:
    for name, raw in params.items():
        spec = specs.get(name)
        if spec is None:
            errors.append(f"Param property '{name}' hasn't specified in schema")
            continue
        _COERCERS[spec.type](name, raw, processed, errors)


def _coerce_string(
    name: str, raw: Any, processed: Dict[str, Any], errors: List[str]
) -> None:
    processed[name] = to_js_string(raw)


def _coerce_number(
    name: str, raw: Any, processed: Dict[str, Any], errors: List[str]
) -> None:
    # Empty-like input is skipped entirely and the field stays unset
    if is_empty_like(raw):
        return

    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        processed[name] = raw
    else:
        processed[name] = to_number(raw)

    if not is_number(processed[name]):
        errors.append(_type_error(name, ParamType.NUMBER))


def _coerce_boolean(
    name: str, raw: Any, processed: Dict[str, Any], errors: List[str]
) -> None:
    if not is_empty_like(raw) and not isinstance(raw, bool):
        _store_parsed(name, raw, ParamType.BOOLEAN, processed, errors)
    else:
        processed[name] = raw

    if not isinstance(processed.get(name), bool):
        errors.append(_type_error(name, ParamType.BOOLEAN))


def _coerce_array(
    name: str, raw: Any, processed: Dict[str, Any], errors: List[str]
) -> None:
    if not is_empty_like(raw) and not isinstance(raw, list):
        _store_parsed(name, raw, ParamType.ARRAY, processed, errors)
    else:
        processed[name] = raw

    if not isinstance(processed.get(name), list):
        errors.append(_type_error(name, ParamType.ARRAY))


def _coerce_object(
    name: str, raw: Any, processed: Dict[str, Any], errors: List[str]
) -> None:
    if not is_empty_like(raw) and not isinstance(raw, dict):
        _store_parsed(name, raw, ParamType.OBJECT, processed, errors)
    else:
        processed[name] = raw

    # null counts as an object; an unset field does not
    if name not in processed or not (
        processed[name] is None or isinstance(processed[name], dict)
    ):
        errors.append(_type_error(name, ParamType.OBJECT))


def _store_parsed(
    name: str,
    raw: Any,
    param_type: ParamType,
    processed: Dict[str, Any],
    errors: List[str],
) -> None:
    parsed = parse_json(raw)
    if parsed.ok:
        processed[name] = parsed.value
    else:
        errors.append(
            f"Param property '{name}' caught an error '{parsed.error}' "
            f"trying beeing converted to type {param_type.value}"
        )


def _type_error(name: str, param_type: ParamType) -> str:
    return f"Param property '{name}' must be a type of {param_type.value}"


_COERCERS: Dict[ParamType, _Coercer] = {
    ParamType.STRING: _coerce_string,
    ParamType.NUMBER: _coerce_number,
    ParamType.BOOLEAN: _coerce_boolean,
    ParamType.ARRAY: _coerce_array,
    ParamType.OBJECT: _coerce_object,
}
