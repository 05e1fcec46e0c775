"""CMS Formatter.

Template-driven commit messages and entry slugs for a git-backed
content management system.
"""

from cms_formatter.core.slug import prepare_slug, sanitize_slug
from cms_formatter.formatters import CommitPayload, commit_message_formatter, slug_formatter
from cms_formatter.templates import decompose_date, resolve

__version__ = "0.1.0"
__all__ = [
    "CommitPayload",
    "__version__",
    "commit_message_formatter",
    "decompose_date",
    "prepare_slug",
    "resolve",
    "sanitize_slug",
    "slug_formatter",
]
