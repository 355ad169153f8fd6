from typing import Any

from pydantic import BaseModel, ConfigDict, RootModel, model_validator


class SumUpModel(BaseModel):
    """Base for SDK payload models.

    Incoming keys are matched to field names and aliases case-insensitively,
    so ``{"Status": "paired"}`` populates a field aliased ``status``.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
        arbitrary_types_allowed=True,
        extra="allow",
    )

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        canonical: dict[str, str] = {}
        for name, field in cls.model_fields.items():
            key = field.alias or name
            canonical.setdefault(name.lower(), key)
            canonical.setdefault(key.lower(), key)

        normalized: dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(key, str):
                target = canonical.get(key.lower(), key)
                if target in data and target != key:
                    # exact match wins over a differently cased duplicate
                    continue
                normalized[target] = value
            else:
                normalized[key] = value
        return normalized


class JsonDocument(RootModel[Any]):
    """A JSON document that is not bound to a concrete model.

    As a response type it returns the parsed body untouched; as a request body
    it is sent as-is.
    """

    def __getitem__(self, item: Any) -> Any:
        return self.root[item]
