"""Shared model base for camelCase JSON documents."""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class CamelModel(BaseModel):
    """Model that reads camelCase keys and ignores unknown ones."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def parse_entries(raw: Any, model: type[M], kind: str = "entry") -> list[M]:
    """Validate each list item on its own, skipping the ones that fail.

    Args:
        raw: Raw JSON value (expected to be a list of objects)
        model: Model class to validate each item with
        kind: Label used in log messages

    Returns:
        Valid entries, in their original order
    """
    if raw is None:
        return []
    if not isinstance(raw, list):
        logger.warning(f"Ignoring {kind} list: expected an array, got {type(raw).__name__}")
        return []

    entries = []
    for index, item in enumerate(raw):
        if isinstance(item, model):
            entries.append(item)
            continue
        try:
            entries.append(model.model_validate(item))
        except ValidationError as e:
            problems = ", ".join(
                ".".join(str(p) for p in err["loc"]) or "value" for err in e.errors()
            )
            logger.warning(f"Skipping {kind} #{index}: invalid {problems}")
    return entries


def stringify_number(value: Any) -> Any:
    """JSON numbers become their text form; everything else passes through."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def field_default(model: type[BaseModel], name: str) -> Any:
    return model.model_fields[name].get_default(call_default_factory=True)


def fall_back_to_default(cls, value, handler, info):
    """Body of a wrap validator: an invalid value becomes the field's default."""
    try:
        return handler(value)
    except ValidationError:
        logger.warning(f"Ignoring invalid {cls.__name__}.{info.field_name}: {value!r}")
        return field_default(cls, info.field_name)
