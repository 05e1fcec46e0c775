"""Core configuration, errors and slug utilities."""

from cms_formatter.core.config import (
    DEFAULT_COLLECTION_LABEL,
    IDENTIFIER_FIELDS,
    BackendConfig,
    CmsConfig,
    CollectionConfig,
    CommitMessages,
    FieldConfig,
    SlugConfig,
    load_config,
    select_identifier,
)
from cms_formatter.core.errors import (
    ConfigurationError,
    MissingIdentifierError,
    UnknownActionError,
)
from cms_formatter.core.slug import (
    SlugGenerator,
    decode_uri_component,
    encode_uri_component,
    prepare_slug,
    sanitize_slug,
)

__all__ = [
    "DEFAULT_COLLECTION_LABEL",
    "IDENTIFIER_FIELDS",
    "BackendConfig",
    "CmsConfig",
    "CollectionConfig",
    "CommitMessages",
    "FieldConfig",
    "SlugConfig",
    "SlugGenerator",
    "load_config",
    "select_identifier",
    "decode_uri_component",
    "encode_uri_component",
    "prepare_slug",
    "sanitize_slug",
    "ConfigurationError",
    "MissingIdentifierError",
    "UnknownActionError",
]
