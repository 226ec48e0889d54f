"""JSON conversion backed by pydantic."""

import json
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .config import JsonOptions
from .exceptions import SerializationError

_ANY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


def dumps(value: Any, options: JsonOptions | None = None) -> str:
    """
    Serialize a value to JSON text.

    Plain JSON types, pydantic models, dataclasses and anything else pydantic
    knows how to serialize are accepted.

    Args:
        value: Value to serialize
        options: JSON options, defaults to compact output

    Returns:
        JSON text

    Raises:
        SerializationError: If the value cannot be represented as JSON
    """
    options = options or JsonOptions()
    try:
        jsonable = _ANY_ADAPTER.dump_python(
            value,
            mode="json",
            by_alias=options.by_alias,
            exclude_none=options.exclude_none,
        )
        return json.dumps(
            jsonable,
            indent=options.indent,
            sort_keys=options.sort_keys,
            ensure_ascii=options.ensure_ascii,
            separators=options.separators,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(
            f"Failed to serialize {type(value).__name__} to JSON: {e}"
        ) from e


def loads(data: bytes | str, target: Any = Any, options: JsonOptions | None = None) -> Any:
    """
    Parse JSON text and validate it into the target type.

    Args:
        data: JSON document
        target: Any type pydantic can validate (models, dataclasses, dict, list[...], Any)
        options: JSON options; only ``strict`` applies

    Returns:
        Value of the target type

    Raises:
        SerializationError: If the document is not valid JSON for the target
    """
    options = options or JsonOptions()
    try:
        adapter = TypeAdapter(target)
    except TypeError as e:
        raise SerializationError(f"Unsupported deserialization target {target!r}: {e}") from e

    try:
        return adapter.validate_json(data, strict=options.strict)
    except ValidationError as e:
        raise SerializationError(
            f"Failed to deserialize JSON content into {getattr(target, '__name__', target)}: {e}"
        ) from e
