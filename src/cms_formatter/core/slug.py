"""Slug sanitization utilities for URL and filesystem safe identifiers."""

from __future__ import annotations

import re
import unicodedata
from urllib.parse import quote, unquote

from cms_formatter.core.config import SlugConfig

# Characters encodeURIComponent leaves alone besides the unreserved set.
URI_COMPONENT_SAFE = "!~*'()"

MAX_FILENAME_BYTES = 255

_URI_CHARS = re.compile(r"[A-Za-z0-9_.~-]")
# RFC 3987 ucschar ranges.
_UCS_CHARS = re.compile(
    "["
    "\u00a0-\ud7ff\uf900-\ufdcf\ufdf0-\uffef"
    "\U00010000-\U0001fffd\U00020000-\U0002fffd\U00030000-\U0003fffd"
    "\U00040000-\U0004fffd\U00050000-\U0005fffd\U00060000-\U0006fffd"
    "\U00070000-\U0007fffd\U00080000-\U0008fffd\U00090000-\U0009fffd"
    "\U000a0000-\U000afffd\U000b0000-\U000bfffd\U000c0000-\U000cfffd"
    "\U000d0000-\U000dfffd\U000e1000-\U000efffd"
    "]"
)

_ILLEGAL_FILENAME = re.compile(r'[/?<>\\:*|"]')
_CONTROL_CHARS = re.compile("[\x00-\x1f\x80-\x9f]")
_RESERVED_FILENAME = re.compile(r"^\.+$")
_WINDOWS_RESERVED = re.compile(r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$", re.IGNORECASE)
_WINDOWS_TRAILING = re.compile(r"[. ]+$")


def prepare_slug(value: str) -> str:
    """Normalize a raw identifier into a slug fragment.

    Trims, lowercases, drops single quotes and turns periods into hyphens.
    Spaces and slashes pass through untouched.
    """
    slug = value.strip().lower().replace("'", "").replace(".", "-")
    # Dropping a quote can expose edge whitespace.
    return slug.strip()


def is_valid_uri_char(char: str, encoding: str = "unicode") -> bool:
    """Return True if ``char`` may appear unescaped in a slug."""
    if _URI_CHARS.fullmatch(char):
        return True
    return encoding == "unicode" and _UCS_CHARS.fullmatch(char) is not None


def sanitize_uri(value: str, replacement: str = "", encoding: str = "unicode") -> str:
    """Replace every character that is not URI safe."""
    return "".join(
        char if is_valid_uri_char(char, encoding) else replacement for char in value
    )


def sanitize_filename(value: str, replacement: str = "") -> str:
    """Replace characters and names that are unsafe as a file name."""
    sanitized = _ILLEGAL_FILENAME.sub(replacement, value)
    sanitized = _CONTROL_CHARS.sub(replacement, sanitized)
    sanitized = _RESERVED_FILENAME.sub(replacement, sanitized)
    sanitized = _WINDOWS_RESERVED.sub(replacement, sanitized)
    sanitized = _WINDOWS_TRAILING.sub(replacement, sanitized)
    encoded = sanitized.encode("utf-8")
    if len(encoded) <= MAX_FILENAME_BYTES:
        return sanitized
    return encoded[:MAX_FILENAME_BYTES].decode("utf-8", errors="ignore")


def strip_diacritics(value: str) -> str:
    """Remove combining accents, e.g. ``Café`` becomes ``Cafe``."""
    normalized = unicodedata.normalize("NFKD", value)
    return "".join(char for char in normalized if not unicodedata.combining(char))


def sanitize_slug(value: str, config: SlugConfig | None = None) -> str:
    """Turn a string into a single safe path segment.

    Args:
        value: Text to sanitize.
        config: Slug settings. Defaults to unicode encoding, accents kept,
            ``-`` as replacement.

    Returns:
        The sanitized segment, with doubled and leading/trailing
        replacement characters removed.
    """
    if not isinstance(value, str):
        raise TypeError("The input slug must be a string.")
    config = config or SlugConfig()
    replacement = config.sanitize_replacement

    slug = strip_diacritics(value) if config.clean_accents else value
    slug = sanitize_uri(slug, replacement=replacement, encoding=config.encoding)
    slug = sanitize_filename(slug, replacement=replacement)

    if not replacement:
        return slug
    escaped = re.escape(replacement)
    slug = re.sub(f"(?:{escaped})+", replacement, slug)
    slug = re.sub(f"^{escaped}", "", slug)
    return re.sub(f"{escaped}$", "", slug)


def encode_uri_component(value: str) -> str:
    """Percent-encode a value the way browsers encode a URI component."""
    return quote(value, safe=URI_COMPONENT_SAFE)


def decode_uri_component(value: str) -> str:
    """Decode percent escapes. Malformed escapes are left as they are."""
    return unquote(value)


class SlugGenerator:
    """Generate slugs for one collection's settings.

    Bundles the slug configuration with the steps the slug formatter
    needs: preparing the identifier and sanitizing or encoding the result.
    """

    def __init__(self, config: SlugConfig | None = None, *, sub_folders: bool = False) -> None:
        """Initialize slug generator.

        Args:
            config: Global slug settings.
            sub_folders: Whether slugs may span several path segments.
        """
        self.config = config or SlugConfig()
        self.sub_folders = sub_folders

    def prepare(self, value: object) -> str:
        """Prepare an identifier value for use as the ``slug`` token."""
        slug = prepare_slug(str(value))
        if self.sub_folders:
            return decode_uri_component(slug)
        return slug

    def finalize(self, value: str) -> str:
        """Make a resolved slug template safe as a path."""
        if self.sub_folders:
            return encode_uri_component(value)
        return sanitize_slug(value.replace("/", "-"), self.config)
