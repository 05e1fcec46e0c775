"""Slug formatting for new entries."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

import structlog

from cms_formatter.core.config import CollectionConfig, SlugConfig, select_identifier
from cms_formatter.core.errors import MissingIdentifierError
from cms_formatter.core.slug import SlugGenerator
from cms_formatter.templates import (
    TemplateContext,
    TokenResolver,
    decompose_date,
    get_in,
    log_warning,
    unknown_variable_message,
)

logger = structlog.get_logger()

DEFAULT_SLUG_TEMPLATE = "{{slug}}"
SLUG_TEMPLATE_KIND = "slug"


def slug_formatter(
    collection: CollectionConfig,
    entry_data: Mapping[str, Any],
    slug_config: SlugConfig | None = None,
    *,
    now: datetime | None = None,
    identifier: Callable[[CollectionConfig], str] = select_identifier,
    warn: Callable[[str], None] = log_warning,
) -> str:
    """Build the slug for an entry from its collection's slug template.

    The ``slug`` token is the prepared identifier field. ``fields.<name>``
    tokens read the entry as is and date tokens come from ``now``.
    Collections with ``content_in_sub_folders`` keep slashes and get a
    percent-encoded result; others are flattened into one segment.

    Args:
        collection: Collection the entry belongs to.
        entry_data: Entry field values.
        slug_config: Global slug settings.
        now: Reference date for date tokens. Defaults to the current time.
        identifier: Picks the entry field used as the ``slug`` token.
        warn: Sink receiving one message per unresolved token.

    Raises:
        MissingIdentifierError: If the identifier field has no value.
    """
    template = collection.slug or DEFAULT_SLUG_TEMPLATE
    field_name = identifier(collection)
    value = get_in(entry_data, field_name)
    if value is None or str(value) == "":
        raise MissingIdentifierError(collection.name, field_name)

    generator = SlugGenerator(slug_config, sub_folders=collection.content_in_sub_folders)
    context = TemplateContext(
        builtins={"slug": value},
        fields=entry_data,
        dates=decompose_date(now or datetime.now()),
    )
    resolver = TokenResolver(
        on_unknown=lambda name: warn(unknown_variable_message(name, SLUG_TEMPLATE_KIND)),
        transforms={"slug": generator.prepare},
    )
    slug = resolver.resolve(template, context).text
    logger.debug("slug_resolved", collection=collection.name, slug=slug)
    return generator.finalize(slug)
