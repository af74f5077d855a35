"""
Noteful Backend — HTML Sanitizer for Free-Text Fields
=======================================================

What:  Neutralizes markup in folder/note names and note content before
       they leave the API.
Why:   Clients render these fields as HTML; stored `<script>` tags or
       event-handler attributes must not execute in a consumer's page.
How:   Streams the text through `html.parser.HTMLParser` and rebuilds it:
       allow-listed formatting tags survive with allow-listed attributes,
       every other tag is shown as literal text with `<`/`>` escaped.
Who:   Called by the serialization layer for every response.

Behavior summary:
    <script>alert("x")</script>      → &lt;script&gt;alert("x")&lt;/script&gt;
    <img src="a.png" onerror="...">  → <img src="a.png">
    <a href="javascript:...">x</a>   → <a>x</a>
    <strong>bold</strong>            → <strong>bold</strong>
    a < b                            → a &lt; b
    Tom & "Jerry"                    → Tom & "Jerry"   (plain text untouched)

This is not a general-purpose sanitizer; it only closes the tag and
attribute vectors above. Apply it exactly once per response.
"""

import html
import re
from html.entities import name2codepoint
from html.parser import HTMLParser
from typing import Dict, FrozenSet, List, Optional, Tuple
from urllib.parse import urlparse

# Tag → attributes allowed on it
ALLOWED_TAGS: Dict[str, FrozenSet[str]] = {
    "a": frozenset({"href", "title", "target"}),
    "abbr": frozenset({"title"}),
    "b": frozenset(),
    "blockquote": frozenset({"cite"}),
    "br": frozenset(),
    "code": frozenset(),
    "del": frozenset({"datetime"}),
    "div": frozenset(),
    "em": frozenset(),
    "h1": frozenset(),
    "h2": frozenset(),
    "h3": frozenset(),
    "h4": frozenset(),
    "h5": frozenset(),
    "h6": frozenset(),
    "hr": frozenset(),
    "i": frozenset(),
    "img": frozenset({"src", "alt", "title", "width", "height"}),
    "ins": frozenset({"datetime"}),
    "li": frozenset(),
    "ol": frozenset(),
    "p": frozenset(),
    "pre": frozenset(),
    "s": frozenset(),
    "small": frozenset(),
    "span": frozenset(),
    "strong": frozenset(),
    "sub": frozenset(),
    "sup": frozenset(),
    "u": frozenset(),
    "ul": frozenset(),
}

# Attributes holding URLs; their scheme is checked
URL_ATTRIBUTES = frozenset({"href", "src", "cite"})
ALLOWED_URL_SCHEMES = frozenset({"http", "https", "mailto", "tel"})

# Browsers ignore control characters and whitespace inside URL schemes
_URL_NOISE = re.compile(r"[\x00-\x20]+")


def _escape_brackets(text: str) -> str:
    return text.replace("<", "&lt;").replace(">", "&gt;")


def _is_safe_url(value: str) -> bool:
    compact = _URL_NOISE.sub("", value)
    if not compact:
        return False
    scheme = urlparse(compact).scheme
    return not scheme or scheme.lower() in ALLOWED_URL_SCHEMES


class _SanitizingParser(HTMLParser):
    """Collects sanitized output in `self.result` while parsing."""

    def __init__(self):
        # convert_charrefs=False: entity references reach handle_entityref
        # and are echoed back instead of being decoded into raw characters
        super().__init__(convert_charrefs=False)
        self.result: List[str] = []

    # ── Tags ──────────────────────────────────────────────────────────────

    def _render_tag(
        self, tag: str, attrs: List[Tuple[str, Optional[str]]], self_closing: bool
    ) -> None:
        allowed = ALLOWED_TAGS.get(tag)
        if allowed is None:
            self.result.append(_escape_brackets(self.get_starttag_text() or f"<{tag}>"))
            return

        parts = [tag]
        for name, value in attrs:
            name = name.lower()
            if name not in allowed:
                continue
            value = (value or "").strip()
            if name in URL_ATTRIBUTES and not _is_safe_url(value):
                continue
            parts.append(f'{name}="{html.escape(value, quote=True)}"')

        closing = " /" if self_closing else ""
        self.result.append(f"<{' '.join(parts)}{closing}>")

    def handle_starttag(self, tag, attrs):
        self._render_tag(tag.lower(), attrs, self_closing=False)

    def handle_startendtag(self, tag, attrs):
        self._render_tag(tag.lower(), attrs, self_closing=True)

    def handle_endtag(self, tag):
        tag = tag.lower()
        if tag in ALLOWED_TAGS:
            self.result.append(f"</{tag}>")
        else:
            self.result.append(f"&lt;/{tag}&gt;")

    # ── Text ──────────────────────────────────────────────────────────────

    def handle_data(self, data):
        self.result.append(_escape_brackets(data))

    def handle_entityref(self, name):
        # Unknown names ("AT&T") were never entities; keep them as typed
        if name in name2codepoint:
            self.result.append(f"&{name};")
        else:
            self.result.append(f"&{name}")

    def handle_charref(self, name):
        self.result.append(f"&#{name};")

    # Comments, doctypes and processing instructions are dropped
    def handle_comment(self, data):
        pass

    def handle_decl(self, decl):
        pass

    def handle_pi(self, data):
        pass

    def unknown_decl(self, data):
        pass


def clean_html(value: Optional[str]) -> Optional[str]:
    """
    Sanitize one free-text field.

    None passes through unchanged so callers can feed optional columns
    without special-casing them.
    """
    if value is None:
        return None
    if "<" not in value and ">" not in value:
        return value
    parser = _SanitizingParser()
    parser.feed(value)
    parser.close()
    return "".join(parser.result)
