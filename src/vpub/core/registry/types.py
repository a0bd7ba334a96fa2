"""Registry response models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VersionMetadata(BaseModel):
    """Per-version document; only `version` is read."""

    model_config = ConfigDict(extra="ignore")

    version: str | None = None


class RegistryPackageInfo(BaseModel):
    """Package document returned by `GET <registry>/<name>`.

    A document without `versions`, or with `versions: null`, has no published
    versions. A null entry keeps its key but carries no metadata.
    """

    model_config = ConfigDict(extra="ignore")

    versions: dict[str, VersionMetadata] = Field(default_factory=dict)

    @field_validator("versions", mode="before")
    @classmethod
    def _null_versions_as_empty(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {key: {} if entry is None else entry for key, entry in value.items()}
        return value
