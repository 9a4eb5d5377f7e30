"""Shared base for persisted models."""

from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """
    Base for records stored in the key-value blobs.

    Attributes are snake_case in Python and camelCase in the stored JSON
    (e.g. ``created_at`` <-> ``createdAt``). Either spelling is accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict[str, Any]:
        """Dump to a JSON-ready dict using the stored (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def field_name(cls, key: str) -> str | None:
        """Resolve a field name or its alias to the field name."""
        if key in cls.model_fields:
            return key
        for name, info in cls.model_fields.items():
            if info.alias == key:
                return name
        return None

    def merged(self, patch: Mapping[str, Any], **overrides: Any) -> Self:
        """
        Return a validated copy with ``patch`` merged on top.

        Unknown keys are ignored and ``id`` is never patched.
        """
        data = self.model_dump()
        for key, value in patch.items():
            name = self.field_name(key)
            if name is None or name == "id":
                continue
            data[name] = value
        data.update(overrides)
        return type(self).model_validate(data)
