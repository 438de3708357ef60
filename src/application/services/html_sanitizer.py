"""HTML sanitizer for ticket message bubbles.

Only a small set of formatting tags survives; every other tag is dropped
while its text is kept, except for script-like elements whose content is
dropped too. Text is re-escaped so the output is safe to embed as HTML.
"""

import re
from html import escape
from html.parser import HTMLParser
from typing import List, Optional, Tuple

# Source tag -> emitted tag
ALLOWED_TAGS = {
    "p": "p",
    "b": "strong",
    "strong": "strong",
    "i": "em",
    "em": "em",
    "u": "u",
    "ul": "ul",
    "ol": "ol",
    "li": "li",
    "a": "a",
}

DROPPED_CONTENT_TAGS = frozenset({"script", "style", "head", "title", "iframe"})

SAFE_LINK_PREFIXES = ("http://", "https://", "mailto:")


class _MessageHTMLSanitizer(HTMLParser):
    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.parts: List[str] = []
        # (source tag, emitted tag or None when the tag was dropped)
        self.open_tags: List[Tuple[str, Optional[str]]] = []
        self.skip_depth = 0

    def handle_starttag(self, tag, attrs):
        if tag in DROPPED_CONTENT_TAGS:
            self.skip_depth += 1
            return
        if self.skip_depth:
            return
        if tag == "br":
            self.parts.append("<br>")
            return

        emitted = ALLOWED_TAGS.get(tag)
        if emitted == "a":
            href = dict(attrs).get("href") or ""
            if href.startswith(SAFE_LINK_PREFIXES):
                self.parts.append(
                    f'<a href="{escape(href)}" target="_blank" rel="noopener noreferrer">'
                )
            else:
                emitted = None
        elif emitted:
            self.parts.append(f"<{emitted}>")

        if tag in ALLOWED_TAGS:
            self.open_tags.append((tag, emitted))

    def handle_startendtag(self, tag, attrs):
        if tag == "br" and not self.skip_depth:
            self.parts.append("<br>")

    def handle_endtag(self, tag):
        if tag in DROPPED_CONTENT_TAGS:
            self.skip_depth = max(0, self.skip_depth - 1)
            return
        if self.skip_depth:
            return
        if not any(source == tag for source, _ in self.open_tags):
            return
        # Close everything opened after the matching tag
        while self.open_tags:
            source, emitted = self.open_tags.pop()
            if emitted:
                self.parts.append(f"</{emitted}>")
            if source == tag:
                break

    def handle_data(self, data):
        if not self.skip_depth:
            self.parts.append(escape(data, quote=False))

    def result(self) -> str:
        while self.open_tags:
            _, emitted = self.open_tags.pop()
            if emitted:
                self.parts.append(f"</{emitted}>")
        return "".join(self.parts)


def sanitize_message_html(html: str) -> str:
    """Keep only safe formatting tags and normalize whitespace."""
    if not html:
        return ""

    parser = _MessageHTMLSanitizer()
    parser.feed(html)
    parser.close()

    result = parser.result()
    result = re.sub(r"\s+", " ", result)
    result = re.sub(r"\s*<br>\s*", "<br>", result)
    result = re.sub(r"\s*</p>\s*<p>\s*", "</p><p>", result)
    return result.strip()
