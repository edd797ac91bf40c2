"""Pydantic data models for skin inputs, records, and the launcher document."""

from __future__ import annotations

import json
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from skinpack.constants import DOCUMENT_VERSION, SKIN_ID_PREFIX


class SkinSource(BaseModel):
    """One input file handed to the converter.

    Attributes:
        name: File name including its extension (e.g. ``"steve.png"``).
        data: Raw file bytes.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    data: bytes = Field(repr=False)

    @property
    def base_name(self) -> str:
        """Return the text preceding the first ``.`` of :attr:`name`.

        ``"a.b.png"`` yields ``"a"``; a name without a dot is returned as is.
        """
        return self.name.split(".", 1)[0]


class SkinRecord(BaseModel):
    """A single entry of the launcher's ``customSkins`` mapping.

    Attributes use snake_case; the launcher's camelCase keys are the
    aliases used for serialization.

    Attributes:
        created: ISO-8601 creation timestamp.
        updated: ISO-8601 update timestamp (always equal to ``created``).
        id: Sequential identifier, ``skin_<n>``.
        name: Display name derived from the file name.
        skin_image: Data URL of the original texture bytes.
        model_image: Data URL of the generated head preview.
        slim: True for the slim (3px arm) model.
        texture_id: Lowercase hex content digest of the texture.
    """

    model_config = ConfigDict(populate_by_name=True)

    created: str
    updated: str
    id: str
    name: str
    skin_image: str = Field(alias="skinImage", repr=False)
    model_image: str = Field(alias="modelImage", repr=False)
    slim: bool
    texture_id: str = Field(alias="textureId")

    @field_validator("id")
    @classmethod
    def _id_has_prefix(cls, v: str) -> str:
        if not v.startswith(SKIN_ID_PREFIX):
            raise ValueError(f"id must start with {SKIN_ID_PREFIX!r}, got {v!r}")
        return v

    @field_validator("texture_id")
    @classmethod
    def _texture_id_is_sha256_hex(cls, v: str) -> str:
        if len(v) != 64 or any(c not in "0123456789abcdef" for c in v):
            raise ValueError("textureId must be 64 lowercase hex characters")
        return v

    @model_validator(mode="after")
    def _updated_matches_created(self) -> "SkinRecord":
        if self.created != self.updated:
            raise ValueError("updated must equal created for a new skin record")
        return self


class SkinDocument(BaseModel):
    """The ``launcher_custom_skins.json`` document.

    ``custom_skins`` is an insertion-ordered mapping from record id to
    record; its order is the processing order of the input files.
    """

    model_config = ConfigDict(populate_by_name=True)

    version: Literal[1] = DOCUMENT_VERSION
    custom_skins: dict[str, SkinRecord] = Field(
        default_factory=dict, alias="customSkins"
    )

    @model_validator(mode="after")
    def _keys_match_record_ids(self) -> "SkinDocument":
        for key, record in self.custom_skins.items():
            if key != record.id:
                raise ValueError(f"customSkins key {key!r} != record id {record.id!r}")
        return self

    def __len__(self) -> int:
        return len(self.custom_skins)

    def add(self, record: SkinRecord) -> None:
        """Append *record*, keyed by its id.

        Raises:
            ValueError: If a record with the same id already exists.
        """
        if record.id in self.custom_skins:
            raise ValueError(f"Duplicate skin id: {record.id}")
        self.custom_skins[record.id] = record

    def records(self) -> list[SkinRecord]:
        """Return the records in processing order."""
        return list(self.custom_skins.values())

    def to_dict(self) -> dict:
        """Return the launcher-facing dict (camelCase keys)."""
        return self.model_dump(by_alias=True)

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to JSON text using the launcher's key names."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
