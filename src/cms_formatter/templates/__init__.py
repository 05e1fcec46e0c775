"""Template resolution: tokens, contexts and date tokens."""

from cms_formatter.templates.context import TemplateContext, get_in
from cms_formatter.templates.dates import DATE_TOKENS, decompose_date
from cms_formatter.templates.resolver import (
    TOKEN_PATTERN,
    ResolutionResult,
    TokenResolver,
    log_warning,
    resolve,
    unknown_variable_message,
)

__all__ = [
    "DATE_TOKENS",
    "TOKEN_PATTERN",
    "ResolutionResult",
    "TemplateContext",
    "TokenResolver",
    "decompose_date",
    "get_in",
    "log_warning",
    "resolve",
    "unknown_variable_message",
]
