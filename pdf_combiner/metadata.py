"""Output metadata handling for :mod:`pdf_combiner`."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional

LOGGER = logging.getLogger("pdf_combiner.metadata")


class MetaField(str, Enum):
    """Metadata fields that can be written to the combined PDF."""

    TITLE = "title"
    AUTHOR = "author"
    SUBJECT = "subject"
    KEYWORDS = "keywords"
    CREATOR = "creator"

    @classmethod
    def lookup(cls, key: str) -> Optional["MetaField"]:
        try:
            return cls(str(key).strip().lower())
        except ValueError:
            return None


SETTER_NAMES: Dict[MetaField, str] = {
    MetaField.TITLE: "set_title",
    MetaField.AUTHOR: "set_author",
    MetaField.SUBJECT: "set_subject",
    MetaField.KEYWORDS: "set_keywords",
    MetaField.CREATOR: "set_creator",
}


def setter_table(engine: object) -> Dict[MetaField, Callable[[str], None]]:
    """Return the metadata setters *engine* actually provides."""

    table: Dict[MetaField, Callable[[str], None]] = {}
    for meta_field, attribute in SETTER_NAMES.items():
        setter = getattr(engine, attribute, None)
        if callable(setter):
            table[meta_field] = setter
    return table


def apply_metadata(engine: object, fields: Mapping[str, Optional[str]]) -> List[MetaField]:
    """Write *fields* to *engine* and return the fields that were applied.

    Keys are matched case-insensitively against :class:`MetaField`. Unknown
    keys, ``None`` values and fields the engine has no setter for are skipped.
    """

    setters = setter_table(engine)
    applied: List[MetaField] = []

    for key, value in fields.items():
        meta_field = MetaField.lookup(key)
        if meta_field is None:
            LOGGER.debug("Ignoring unknown metadata field %r", key)
            continue
        if value is None:
            LOGGER.debug("Skipping empty metadata field %r", meta_field.value)
            continue
        setter = setters.get(meta_field)
        if setter is None:
            LOGGER.debug("Engine has no setter for metadata field %r", meta_field.value)
            continue
        setter(str(value))
        applied.append(meta_field)

    LOGGER.debug("Applied metadata fields: %s", [meta_field.value for meta_field in applied])
    return applied


__all__ = ["MetaField", "SETTER_NAMES", "setter_table", "apply_metadata"]
