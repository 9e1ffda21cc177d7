"""
Struct tag parsing.

A struct tag is a single annotation string attached to a field, made of
space-separated ``key:"value"`` pairs, e.g. ``cli:"name" alias:"['n', 'nm']"``.
Values are double-quoted with backslash escapes. A tag value may further use
the bracketed list form ``[token, token, ...]`` where each token may be
wrapped in single quotes.
"""

import json
import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from attrs import frozen

from clistruct.core.config import DEFAULT_CONFIG, ReflectConfig

if TYPE_CHECKING:
    from clistruct.structure.fields import StructField

logger = logging.getLogger(__name__)


def _iter_pairs(raw: str) -> Iterator[tuple[str, str]]:
    """
    Yield (key, quoted_value) pairs from a raw tag string.

    Scanning stops silently at the first malformed pair; everything parsed
    before it is still yielded.
    """
    tag = raw
    while tag:
        tag = tag.lstrip(" ")
        if not tag:
            break

        i = 0
        while i < len(tag) and tag[i] > " " and tag[i] not in ':"\x7f':
            i += 1
        if i == 0 or i + 1 >= len(tag) or tag[i] != ":" or tag[i + 1] != '"':
            logger.debug("Stopped parsing malformed struct tag %r at %r", raw, tag)
            break
        key = tag[:i]
        tag = tag[i + 1 :]

        i = 1
        while i < len(tag) and tag[i] != '"':
            if tag[i] == "\\":
                i += 1
            i += 1
        if i >= len(tag):
            logger.debug("Unterminated value for key %r in struct tag %r", key, raw)
            break
        quoted = tag[: i + 1]
        tag = tag[i + 1 :]
        yield key, quoted


@frozen
class StructTag:
    """Raw struct tag attached to a field, with key lookup."""

    raw: str = ""

    @classmethod
    def from_mapping(cls, entries: Mapping[str, Any]) -> "StructTag":
        """
        Build a tag from plain ``{key: value}`` metadata entries.

        Non-string values are skipped.
        """
        parts = [
            f"{key}:{json.dumps(value, ensure_ascii=False)}"
            for key, value in entries.items()
            if isinstance(value, str)
        ]
        return cls(" ".join(parts))

    def lookup(self, key: str) -> tuple[str, bool]:
        """
        Look up the value stored under key.

        Returns:
            (value, True) if the key is present, ("", False) otherwise
        """
        for name, quoted in _iter_pairs(self.raw):
            if name != key:
                continue
            try:
                value = json.loads(quoted)
            except ValueError:
                logger.debug("Cannot unquote value %s for key %r", quoted, key)
                break
            return value, True
        return "", False

    def get(self, key: str) -> str:
        """Return the value stored under key, or an empty string when absent."""
        value, _ = self.lookup(key)
        return value

    def keys(self) -> list[str]:
        """List the keys present in the tag, in order."""
        return [name for name, _ in _iter_pairs(self.raw)]

    def __str__(self) -> str:
        return self.raw


def _clean_token(token: str, quote: str) -> str:
    token = token.strip()
    # One quote off each edge, independently; unmatched quotes are not restored
    if token.startswith(quote):
        token = token[len(quote) :]
    if token.endswith(quote):
        token = token[: len(token) - len(quote)]
    return token


def parse_tag_list(text: str, config: ReflectConfig | None = None) -> list[str]:
    """
    Parse tag text into a list of tokens.

    Params:
        text: Tag value text, e.g. "[foo, 'bar']" or "single"
        config: Optional grammar configuration

    Returns:
        [] for empty text; the trimmed, quote-stripped tokens for bracketed
        text; a single-element list with the trimmed text otherwise

    Examples:
        "[foo, bar, baz]" -> ["foo", "bar", "baz"]
        "single" -> ["single"]
        "['a','b,c']" -> ["a", "b", "c"] (separators inside quotes still split)
    """
    config = config or DEFAULT_CONFIG
    text = text.strip()
    if not text:
        return []

    opener, closer = config.list_open, config.list_close
    bracketed = (
        len(text) >= len(opener) + len(closer)
        and text.startswith(opener)
        and text.endswith(closer)
    )
    if not bracketed:
        return [text]

    body = text[len(opener) : len(text) - len(closer)]
    separator = config.list_separator
    tokens = []
    start = 0
    pos = 0
    while pos <= len(body) - len(separator):
        if body.startswith(separator, pos):
            tokens.append(body[start:pos])
            pos += len(separator)
            start = pos
        else:
            pos += 1
    tokens.append(body[start:])

    return [_clean_token(token, config.quote_char) for token in tokens]


def get_struct_field_tag(field: "StructField", name: str) -> str:
    """
    Read a field's tag value under name.

    Returns:
        The trimmed value, or "" when the key is absent
    """
    return field.tag.get(name).strip()


def get_struct_field_tag_slice(
    field: "StructField", name: str, config: ReflectConfig | None = None
) -> list[str]:
    """
    Read a field's tag value under name as a list.

    See parse_tag_list for the list grammar.
    """
    return parse_tag_list(field.tag.get(name), config)
