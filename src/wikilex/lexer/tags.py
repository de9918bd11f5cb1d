"""Tag name tables for tag recognition.

Two fixed tables: HTML tags allowed in wikitext, and wiki extension tags.
Names are lowercase; a few extension tags contain an interior space
(``math chem``), which is why normalization only trims the ends.

Tag recognition is incremental: while a tag is being read character by
character, the partial name must stay a prefix of some known name.
TagTable precomputes every prefix so that test is a set lookup.

Thread Safety:
All tables are frozensets and TagTable instances are immutable.

"""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wikilex.config import TokenizeConfig

# HTML tags supported in wikitext
HTML_TAGS: frozenset[str] = frozenset(
    {
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "p",
        "br",
        "hr",
        "abbr",
        "b",
        "bdi",
        "bdo",
        "blockquote",
        "cite",
        "code",
        "data",
        "del",
        "dfn",
        "em",
        "i",
        "ins",
        "kbd",
        "mark",
        "pre",
        "q",
        "rp",
        "rt",
        "ruby",
        "s",
        "samp",
        "small",
        "strong",
        "sub",
        "sup",
        "time",
        "u",
        "var",
        "wbr",
        "dl",
        "dt",
        "dd",
        "ol",
        "ul",
        "li",
        "div",
        "span",
        "table",
        "td",
        "tr",
        "th",
        "caption",
        "thead",
        "tfoot",
        "tbody",
        # Obsolete but supported
        "center",
        "font",
        "rb",
        "strike",
        "tt",
    }
)

# Wiki extension tags
EXTENSION_TAGS: frozenset[str] = frozenset(
    {
        "categorytree",
        "ce",
        "charinsert",
        "chem",
        "gallery",
        "graph",
        "hiero",
        "imagemap",
        "includeonly",
        "indicator",
        "inputbox",
        "mapframe",
        "maplink",
        "math",
        "math chem",
        "noinclude",
        "nowiki",
        "onlyinclude",
        "poem",
        "pre",
        "ref",
        "references",
        "score",
        "section",
        "source",
        "syntaxhighlight",
        "templatedata",
        "templatestyles",
        "timeline",
    }
)


def normalize_tag_name(name: str) -> str:
    """Trim surrounding whitespace and lowercase a tag name.

    Interior whitespace is kept since some extension tags contain a space.

    Example:
        >>> normalize_tag_name("  Math Chem ")
        'math chem'
    """
    return name.strip().lower()


def _normalized_names(names: Iterable[str]) -> frozenset[str]:
    # Blank names are dropped; every recognized tag has a non-empty name.
    return frozenset(n for n in map(normalize_tag_name, names) if n)


class TagTable:
    """Immutable set of recognized tag names with prefix lookup.

    Usage:
            >>> table = TagTable(HTML_TAGS, EXTENSION_TAGS)
            >>> table.is_tag("DIV")
            True
            >>> table.is_tag_prefix("  tab")
            True

    """

    __slots__ = ("_html_tags", "_extension_tags", "_names", "_prefixes")

    def __init__(
        self,
        html_tags: Iterable[str],
        extension_tags: Iterable[str] = (),
    ) -> None:
        self._html_tags = _normalized_names(html_tags)
        self._extension_tags = _normalized_names(extension_tags)
        self._names = self._html_tags | self._extension_tags
        # Every leading substring of every name, including the empty string
        self._prefixes = frozenset(
            name[:end] for name in self._names for end in range(len(name) + 1)
        )

    @property
    def html_tags(self) -> frozenset[str]:
        return self._html_tags

    @property
    def extension_tags(self) -> frozenset[str]:
        return self._extension_tags

    @property
    def names(self) -> frozenset[str]:
        """All recognized names."""
        return self._names

    def is_tag(self, name: str) -> bool:
        """Check exact membership after normalization."""
        return normalize_tag_name(name) in self._names

    def is_tag_prefix(self, partial: str) -> bool:
        """Check whether a partially read name can still become a tag."""
        return normalize_tag_name(partial) in self._prefixes

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_tag(name)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return (
            f"TagTable(html={len(self._html_tags)}, "
            f"extension={len(self._extension_tags)})"
        )


# Process-wide table built from the static lists above
DEFAULT_TAG_TABLE: TagTable = TagTable(HTML_TAGS, EXTENSION_TAGS)


def is_tag(name: str) -> bool:
    """Check if name is a known HTML or extension tag."""
    return DEFAULT_TAG_TABLE.is_tag(name)


def is_tag_prefix(partial: str) -> bool:
    """Check if partial is a prefix of a known HTML or extension tag."""
    return DEFAULT_TAG_TABLE.is_tag_prefix(partial)


@lru_cache(maxsize=32)
def _build_tag_table(extension_tags_enabled: bool, extra_tags: frozenset[str]) -> TagTable:
    extension = EXTENSION_TAGS if extension_tags_enabled else frozenset()
    return TagTable(HTML_TAGS, extension | extra_tags)


def tag_table_for(config: TokenizeConfig) -> TagTable:
    """Return the tag table matching a tokenizer configuration.

    The default configuration maps to DEFAULT_TAG_TABLE; other tables are
    built once per distinct setting and cached.
    """
    if config.extension_tags_enabled and not config.extra_tags:
        return DEFAULT_TAG_TABLE
    return _build_tag_table(config.extension_tags_enabled, config.extra_tags)
