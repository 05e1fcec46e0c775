"""Commit message and slug formatters."""

from cms_formatter.formatters.commit_message import (
    COMMIT_ACTIONS,
    DEFAULT_COMMIT_MESSAGES,
    DEFAULT_OPEN_AUTHORING_MESSAGE,
    CommitAction,
    CommitPayload,
    commit_message_formatter,
)
from cms_formatter.formatters.slug import DEFAULT_SLUG_TEMPLATE, slug_formatter

__all__ = [
    "COMMIT_ACTIONS",
    "DEFAULT_COMMIT_MESSAGES",
    "DEFAULT_OPEN_AUTHORING_MESSAGE",
    "DEFAULT_SLUG_TEMPLATE",
    "CommitAction",
    "CommitPayload",
    "commit_message_formatter",
    "slug_formatter",
]
