"""Commit message formatting for content and media changes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal, get_args

import structlog

from cms_formatter.core.config import DEFAULT_COLLECTION_LABEL, CmsConfig, CollectionConfig
from cms_formatter.core.errors import UnknownActionError
from cms_formatter.core.slug import decode_uri_component
from cms_formatter.templates import (
    TemplateContext,
    TokenResolver,
    log_warning,
    unknown_variable_message,
)

logger = structlog.get_logger()

CommitAction = Literal["create", "update", "delete", "uploadMedia", "deleteMedia"]
COMMIT_ACTIONS: tuple[str, ...] = get_args(CommitAction)

DEFAULT_COMMIT_MESSAGES: dict[str, str] = {
    "create": 'Create {{collection}} "{{slug}}"',
    "update": 'Update {{collection}} "{{slug}}"',
    "delete": 'Delete {{collection}} "{{slug}}"',
    "uploadMedia": 'Upload "{{path}}"',
    "deleteMedia": 'Delete "{{path}}"',
}
DEFAULT_OPEN_AUTHORING_MESSAGE = "{{message}}"

COMMIT_TEMPLATE_KIND = "commit message"
OPEN_AUTHORING_TEMPLATE_KIND = "open authoring message"


@dataclass
class CommitPayload:
    """Values a commit message may refer to.

    Attributes:
        slug: Entry slug, possibly percent-encoded.
        path: Media or entry file path.
        collection: Collection the entry belongs to, if any.
        author_login: Open authoring contributor login.
        author_name: Open authoring contributor display name.
    """

    slug: str = ""
    path: str = ""
    collection: CollectionConfig | None = None
    author_login: str | None = None
    author_name: str | None = None


def _custom_template(config: CmsConfig | None, key: str) -> str | None:
    if config is None:
        return None
    template = config.get_in(["backend", "commit_messages", key])
    if not isinstance(template, str) or not template.strip():
        return None
    return template


def commit_message_formatter(
    action: CommitAction,
    config: CmsConfig | None,
    payload: CommitPayload,
    is_open_authoring: bool = False,
    *,
    warn: Callable[[str], None] = log_warning,
) -> str:
    """Build the commit message for a content or media action.

    Args:
        action: One of ``create``, ``update``, ``delete``, ``uploadMedia``,
            ``deleteMedia``.
        config: CMS configuration holding optional custom templates.
        payload: Values available to the template.
        is_open_authoring: Wrap the message in the open authoring template.
        warn: Sink receiving one message per unresolved token.

    Returns:
        The commit message. Unknown tokens are dropped, never raised.

    Raises:
        UnknownActionError: If ``action`` is not supported.
    """
    if action not in DEFAULT_COMMIT_MESSAGES:
        raise UnknownActionError(action, COMMIT_ACTIONS)

    template = _custom_template(config, action) or DEFAULT_COMMIT_MESSAGES[action]

    collection = payload.collection
    label = collection.display_label if collection else DEFAULT_COLLECTION_LABEL
    slug = payload.slug
    if collection is not None and collection.content_in_sub_folders:
        slug = decode_uri_component(slug)

    author = {
        "author-login": payload.author_login or "",
        "author-name": payload.author_name or "",
    }
    context = TemplateContext(
        builtins={"slug": slug, "path": payload.path, "collection": label, **author}
    )
    message = TokenResolver(
        on_unknown=lambda name: warn(unknown_variable_message(name, COMMIT_TEMPLATE_KIND))
    ).resolve(template, context).text

    logger.debug("commit_message_built", action=action, open_authoring=is_open_authoring)

    if not is_open_authoring:
        return message

    wrapper = _custom_template(config, "openAuthoring") or DEFAULT_OPEN_AUTHORING_MESSAGE
    wrapper_context = TemplateContext(builtins={"message": message, **author})
    return TokenResolver(
        on_unknown=lambda name: warn(unknown_variable_message(name, OPEN_AUTHORING_TEMPLATE_KIND))
    ).resolve(wrapper, wrapper_context).text
