import dataclasses
from collections.abc import Mapping
from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, TypeAdapter


def to_builtins(
    value: Any,
    *,
    date_format: Optional[str] = None,
    by_alias: bool = True,
    exclude_none: bool = False,
) -> Any:
    """Convert models, dataclasses and containers into plain python values.

    Dates are kept as ``date``/``datetime`` objects unless a ``date_format``
    is given, in which case they are rendered with ``strftime``. Values that
    are neither containers nor models are returned untouched so that the
    caller's codec decides how to render them.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=by_alias, exclude_none=exclude_none)
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = TypeAdapter(type(value)).dump_python(
            value, by_alias=by_alias, exclude_none=exclude_none
        )

    if isinstance(value, Mapping):
        return {
            str(key): to_builtins(
                item,
                date_format=date_format,
                by_alias=by_alias,
                exclude_none=exclude_none,
            )
            for key, item in value.items()
            if not (exclude_none and item is None)
        }
    if isinstance(value, (list, tuple, set, frozenset)):
        return [
            to_builtins(
                item,
                date_format=date_format,
                by_alias=by_alias,
                exclude_none=exclude_none,
            )
            for item in value
        ]
    if date_format and isinstance(value, date):
        return value.strftime(date_format)
    return value


def type_adapter(target_type: Any) -> TypeAdapter:
    return TypeAdapter(Any if target_type is None else target_type)
