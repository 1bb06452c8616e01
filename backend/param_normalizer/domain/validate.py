from __future__ import annotations

from typing import Any, Dict, List, Mapping

from param_normalizer.domain.schema import ParamSpec, ParamType
from param_normalizer.domain.values import MISSING, is_empty_like, is_number


def check_required(
    processed: Dict[str, Any], specs: Mapping[str, ParamSpec]
) -> List[str]:
    """Required-field pass over already coerced params, in schema order."""
    errors: List[str] = []

    for name, spec in specs.items():
        if not spec.required:
            continue

        if name not in processed:
            errors.append(f"Required property '{name}' hasn't found in params")
            continue

        if _is_blank(processed[name], spec.type):
            errors.append(f"Required property '{name}' is empty or has no value")

    return errors


def _is_blank(value: Any, param_type: ParamType) -> bool:
    if param_type == ParamType.NUMBER:
        # 0 is a valid number here, so a zero never counts as missing
        return not is_number(value)
    if param_type == ParamType.BOOLEAN:
        return value is None or value is MISSING
    # string, array, object
    return is_empty_like(value)
