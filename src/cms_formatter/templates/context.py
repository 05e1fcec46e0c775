"""Value lookup for template tokens."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

FIELDS_PREFIX = "fields."


def get_in(record: Mapping[str, Any], path: str) -> Any | None:
    """Walk a dotted key path through nested mappings."""
    node: Any = record
    for key in path.split("."):
        if not isinstance(node, Mapping) or key not in node:
            return None
        node = node[key]
    return node


@dataclass
class TemplateContext:
    """Named values available to a template.

    Lookups go, in order, through the built-in values, then
    ``fields.<name>`` against the entry record, then the date tokens.

    Attributes:
        builtins: Computed values such as ``slug``, ``path`` or ``collection``.
        fields: Entry record reached through ``fields.<name>`` tokens.
        dates: Date tokens, set only when rendering slugs.
    """

    builtins: Mapping[str, Any] = field(default_factory=dict)
    fields: Mapping[str, Any] = field(default_factory=dict)
    dates: Mapping[str, str] = field(default_factory=dict)

    def lookup(self, name: str) -> str | None:
        """Return the string value for a token, or None if it is unknown."""
        if name in self.builtins:
            value = self.builtins[name]
        elif name.startswith(FIELDS_PREFIX):
            value = get_in(self.fields, name[len(FIELDS_PREFIX) :])
        else:
            value = self.dates.get(name)
        if value is None:
            return None
        return str(value)
