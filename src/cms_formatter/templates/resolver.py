"""Placeholder substitution for ``{{token}}`` templates."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

import structlog

from cms_formatter.templates.context import TemplateContext

logger = structlog.get_logger()

TOKEN_PATTERN = re.compile(r"\{\{([^}]+)\}\}")

UnknownTokenHandler = Callable[[str], None]
TokenTransform = Callable[[str], str]


@dataclass
class ResolutionResult:
    """Substituted text plus the names of tokens that could not be resolved."""

    text: str
    unknown: list[str] = field(default_factory=list)


class TokenResolver:
    """Substitute ``{{name}}`` tokens from a TemplateContext.

    Unknown tokens become empty strings. Each occurrence is passed to
    ``on_unknown`` and recorded on the result; substitution carries on.
    """

    def __init__(
        self,
        on_unknown: UnknownTokenHandler | None = None,
        transforms: Mapping[str, TokenTransform] | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            on_unknown: Called with the name of each unresolved token.
            transforms: Post-processing applied to specific tokens' values.
        """
        self.on_unknown = on_unknown
        self.transforms = dict(transforms or {})

    def resolve(self, template: str, context: TemplateContext) -> ResolutionResult:
        unknown: list[str] = []

        def substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            value = context.lookup(name)
            if value is None:
                unknown.append(name)
                if self.on_unknown is not None:
                    self.on_unknown(name)
                return ""
            transform = self.transforms.get(name)
            return transform(value) if transform else value

        text = TOKEN_PATTERN.sub(substitute, template)
        return ResolutionResult(text=text, unknown=unknown)


def resolve(
    template: str,
    context: TemplateContext,
    on_unknown: UnknownTokenHandler | None = None,
) -> str:
    """Resolve a template and return only the substituted text."""
    return TokenResolver(on_unknown=on_unknown).resolve(template, context).text


def unknown_variable_message(name: str, template_kind: str) -> str:
    """Warning text for an unresolved token."""
    return f'Ignoring unknown variable "{name}" in {template_kind} template.'


def log_warning(message: str) -> None:
    """Default diagnostic sink: one warning log line per message."""
    logger.warning(message)
