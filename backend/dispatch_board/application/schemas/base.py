"""Shared pydantic bases for the REST wire format (camelCase JSON)."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self, *, partial: bool = False) -> dict[str, Any]:
        """Serialize for a request body.

        Full payloads drop fields left as ``None``. Partial payloads keep
        exactly the fields the caller set, so the server merges instead of
        clearing what was omitted.
        """
        if partial:
            return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class EntityResponse(CamelModel):
    """Base for records returned by the REST backend.

    Subclasses name the domain dataclass they map onto; unknown keys (joined
    relations such as ``operator``) are ignored.
    """

    entity_class: ClassVar[type]

    def to_entity(self) -> Any:
        return self.entity_class(**self.model_dump())


class EntityFilter(CamelModel):
    """Typed query filter for collection endpoints.

    Strict validation keeps ``"yes"``/``1`` from passing as booleans and
    unknown filter names are refused instead of silently ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
        extra="forbid",
    )

    def to_query_params(self) -> dict[str, str]:
        """Render set filters as string query parameters.

        ``None`` and empty strings are omitted; booleans become
        ``"true"``/``"false"`` and enums their value.
        """
        params: dict[str, str] = {}
        dumped = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        for key, value in dumped.items():
            if isinstance(value, bool):
                params[key] = "true" if value else "false"
            elif value != "":
                params[key] = str(value)
        return params


class ActiveFilter(EntityFilter):
    """Filter for collections that only support the active flag."""

    is_active: bool | None = None
