# contentdesk/utils/sanitize.py
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Mapping, Optional

import nh3

DEFAULT_ALLOWED_TAGS = frozenset({
    # structure
    "address", "article", "aside", "footer", "header", "hgroup", "main",
    "nav", "section", "div", "span", "p", "br", "hr",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "blockquote", "pre", "code", "figure", "figcaption",
    "dl", "dt", "dd", "ol", "ul", "li",
    # inline
    "a", "abbr", "b", "bdi", "bdo", "cite", "data", "dfn", "em", "i",
    "kbd", "mark", "q", "s", "samp", "small", "strong", "sub", "sup",
    "time", "u", "var", "wbr",
    # tables
    "caption", "col", "colgroup", "table", "tbody", "td", "tfoot", "th",
    "thead", "tr",
    # media
    "img",
})

DEFAULT_ALLOWED_ATTRIBUTES = {
    "a": frozenset({"href", "target", "rel"}),
    "img": frozenset({"src", "alt", "width", "height"}),
    "*": frozenset({"class", "id", "style"}),
}

DEFAULT_ALLOWED_SCHEMES = frozenset({"http", "https", "mailto", "data"})


@dataclass(frozen=True)
class SanitizationPolicy:
    """
    Allow-list for user supplied HTML.

    Tags or attributes not listed here are removed from the output. The
    "*" key of allowed_attributes applies to every allowed tag. URL
    attributes whose scheme is not in allowed_schemes are dropped.
    """
    allowed_tags: FrozenSet[str] = DEFAULT_ALLOWED_TAGS
    allowed_attributes: Mapping[str, FrozenSet[str]] = field(
        default_factory=lambda: dict(DEFAULT_ALLOWED_ATTRIBUTES)
    )
    allowed_schemes: FrozenSet[str] = DEFAULT_ALLOWED_SCHEMES

    @classmethod
    def from_config(cls, config: Mapping) -> "SanitizationPolicy":
        tags = config.get("SANITIZE_ALLOWED_TAGS")
        attributes: Optional[Dict] = config.get("SANITIZE_ALLOWED_ATTRIBUTES")
        schemes = config.get("SANITIZE_ALLOWED_SCHEMES")

        return cls(
            allowed_tags=frozenset(tags) if tags else DEFAULT_ALLOWED_TAGS,
            allowed_attributes=(
                {tag: frozenset(attrs) for tag, attrs in attributes.items()}
                if attributes
                else dict(DEFAULT_ALLOWED_ATTRIBUTES)
            ),
            allowed_schemes=frozenset(schemes) if schemes else DEFAULT_ALLOWED_SCHEMES,
        )


# Dropped together with everything inside them
CONTENT_DROPPING_TAGS = frozenset({
    "script", "style",
    # raw text elements, whose markup would otherwise come back escaped
    "iframe", "textarea", "noscript", "xmp", "noembed", "noframes", "title",
})


def sanitize(raw_html: Optional[str], policy: SanitizationPolicy) -> str:
    """
    Clean raw HTML against the policy. Never raises for bad markup;
    disallowed tags are unwrapped, and script, style and raw text elements
    are removed with their contents.
    """
    if not raw_html:
        return ""

    return nh3.clean(
        raw_html,
        tags=set(policy.allowed_tags) - CONTENT_DROPPING_TAGS,
        clean_content_tags=set(CONTENT_DROPPING_TAGS),
        attributes={tag: set(attrs) for tag, attrs in policy.allowed_attributes.items()},
        url_schemes=set(policy.allowed_schemes),
        # rel is author controlled when allowed on links
        link_rel=None,
    )
