"""Configuration schemas and loading for the CMS formatters."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_COLLECTION_LABEL = "Collection"

# Entry fields tried, in order, when a collection names no identifier field.
IDENTIFIER_FIELDS = ("title", "path")

_SAFE_REPLACEMENT = re.compile(r"[A-Za-z0-9_.~-]*")


class SlugConfig(BaseModel):
    """Global slug sanitization settings."""

    encoding: Literal["unicode", "ascii"] = "unicode"
    clean_accents: bool = False
    sanitize_replacement: str = "-"

    @field_validator("sanitize_replacement")
    @classmethod
    def validate_replacement(cls, v: str) -> str:
        if not _SAFE_REPLACEMENT.fullmatch(v):
            raise ValueError(f"The replacement character(s) '{v}' is itself unsafe")
        return v


class CommitMessages(BaseModel):
    """Custom commit message templates, keyed by action."""

    model_config = ConfigDict(populate_by_name=True)

    create: str | None = None
    update: str | None = None
    delete: str | None = None
    upload_media: str | None = Field(default=None, alias="uploadMedia")
    delete_media: str | None = Field(default=None, alias="deleteMedia")
    open_authoring: str | None = Field(default=None, alias="openAuthoring")


class BackendConfig(BaseModel):
    """Version control backend settings."""

    name: str = "git-gateway"
    commit_messages: CommitMessages = Field(default_factory=CommitMessages)


class FieldConfig(BaseModel):
    """A single entry field declared by a collection."""

    name: str
    widget: str = "string"


class CollectionConfig(BaseModel):
    """Configuration for a single content collection.

    Attributes:
        name: Collection identifier.
        label: Plural display label.
        label_singular: Singular display label, preferred in messages.
        slug: Slug template, e.g. ``{{year}}-{{month}}-{{day}}_{{slug}}``.
        identifier_field: Entry field used as the ``slug`` token source.
        content_in_sub_folders: Whether slugs may contain directory separators.
        fields: Declared entry fields.
    """

    name: str = ""
    label: str | None = None
    label_singular: str | None = None
    slug: str | None = None
    identifier_field: str | None = None
    content_in_sub_folders: bool = False
    fields: list[FieldConfig] = Field(default_factory=list)

    @property
    def display_label(self) -> str:
        """Label used in commit messages."""
        return self.label_singular or self.label or DEFAULT_COLLECTION_LABEL


class CmsConfig(BaseModel):
    """Complete CMS configuration."""

    backend: BackendConfig = Field(default_factory=BackendConfig)
    slug: SlugConfig = Field(default_factory=SlugConfig)
    collections: list[CollectionConfig] = Field(default_factory=list)

    @field_validator("collections")
    @classmethod
    def validate_unique_names(cls, v: list[CollectionConfig]) -> list[CollectionConfig]:
        """Ensure collection names do not repeat."""
        names = [collection.name for collection in v]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            msg = f"Duplicate collection names: {', '.join(duplicates)}"
            raise ValueError(msg)
        return v

    def get_in(self, path: Sequence[str], default: Any = None) -> Any:
        """Look up a nested value by key path, e.g. ``["backend", "slug"]``.

        Keys use the serialized (camelCase alias) names. Unset templates
        are absent, so a missing key anywhere on the path yields ``default``.
        """
        node: Any = self.model_dump(by_alias=True, exclude_none=True)
        for key in path:
            if not isinstance(node, Mapping) or key not in node:
                return default
            node = node[key]
        return node

    def get_collection(self, name: str) -> CollectionConfig | None:
        """Find a collection by name."""
        for collection in self.collections:
            if collection.name == name:
                return collection
        return None


def select_identifier(collection: CollectionConfig) -> str:
    """Pick the entry field that supplies a collection's ``slug`` token.

    Tries ``identifier_field`` first, then the common identifier fields,
    matching declared field names case-insensitively. Falls back to
    ``title`` when nothing matches.
    """
    candidates = list(IDENTIFIER_FIELDS)
    if collection.identifier_field:
        candidates.insert(0, collection.identifier_field)

    declared = {field.name.lower().strip(): field.name for field in collection.fields}
    for candidate in candidates:
        match = declared.get(candidate.lower().strip())
        if match is not None:
            return match
    return collection.identifier_field or IDENTIFIER_FIELDS[0]


def load_config(path: str | Path) -> CmsConfig:
    """Load and validate configuration from YAML file.

    Args:
        path: Path to YAML configuration file.

    Returns:
        Validated CmsConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValidationError: If config is invalid.
    """
    config_path = Path(path)
    if not config_path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with config_path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return CmsConfig.model_validate(data)
