# app/schemas/common.py

from typing import Any


def blank_to_none(value: Any) -> Any:
    """Formulários mandam "" para campos não preenchidos; tratamos como ausente."""
    if isinstance(value, str) and not value.strip():
        return None
    return value
