"""
HTML parsing utilities for pulling portfolio text out of rendered pages.

Two extraction paths exist:
- Selector strategies over a parsed DOM (used on browser-rendered pages).
- Regular expressions over raw HTML (used where no browser is available).
"""
import html as html_lib
import re
from typing import Callable, Dict, List, Optional

from bs4 import BeautifulSoup, Tag

SectionStrategy = Callable[[BeautifulSoup, str], Optional[str]]


def _clean_text(text: Optional[str]) -> Optional[str]:
    """Collapse whitespace; empty results become None."""
    if not text:
        return None
    text = re.sub(r'\s+', ' ', text).strip()
    return text or None


def _element_text(element: Optional[Tag]) -> Optional[str]:
    if element is None:
        return None
    return _clean_text(element.get_text(separator=' ', strip=True))


def by_data_section(soup: BeautifulSoup, name: str) -> Optional[str]:
    return _element_text(soup.select_one(f'[data-section="{name}"]'))


HEADING_TAGS = {'h1', 'h2', 'h3', 'h4', 'h5', 'h6'}
HEADING_SELECTOR = 'h1, h2, h3, h4, h5, h6, [class*="chakra-heading"]'


def _is_heading(element: Tag) -> bool:
    if element.name in HEADING_TAGS:
        return True
    return any('chakra-heading' in css_class for css_class in element.get('class') or [])


def by_heading(soup: BeautifulSoup, name: str) -> Optional[str]:
    """
    Text of the siblings following a heading that mentions `name`,
    up to the next heading.
    """
    needle = name.lower()
    for heading in soup.select(HEADING_SELECTOR):
        if needle not in heading.get_text(separator=' ', strip=True).lower():
            continue
        parts = []
        for sibling in heading.find_next_siblings():
            if _is_heading(sibling):
                break
            text = _element_text(sibling)
            if text:
                parts.append(text)
        if parts:
            return ' '.join(parts)
    return None


def by_data_testid(soup: BeautifulSoup, name: str) -> Optional[str]:
    return _element_text(soup.select_one(f'[data-testid="{name}"]'))


def by_role(soup: BeautifulSoup, name: str) -> Optional[str]:
    return _element_text(soup.select_one(f'[role="{name}"]'))


def by_aria_label(soup: BeautifulSoup, name: str) -> Optional[str]:
    return _element_text(soup.select_one(f'[aria-label="{name}" i]'))


def by_class_name(soup: BeautifulSoup, name: str) -> Optional[str]:
    return _element_text(soup.select_one(f'[class*="{name}"]'))


def by_id(soup: BeautifulSoup, name: str) -> Optional[str]:
    return _element_text(soup.find(id=name))


class HTMLParser:
    """Extracts portfolio sections, projects and contact entries from HTML."""

    # Probed in order, first non-empty match wins
    SECTION_STRATEGIES: List[SectionStrategy] = [
        by_data_section,
        by_heading,
        by_data_testid,
        by_role,
        by_aria_label,
        by_class_name,
        by_id,
    ]

    # Tags that never carry visible text
    INVISIBLE_TAGS = ['script', 'style', 'noscript', 'template', 'svg']

    # Element body up to the closing tag of the same name
    _BODY = r'[^>]*>(?P<body>[\s\S]*?)</(?P=tag)\s*>'
    _OPEN = r'<(?P<tag>[a-zA-Z][\w-]*)\b[^>]*?'

    _tag_pattern: re.Pattern = re.compile(r'<[^>]*>')

    @staticmethod
    def parse(html: str) -> BeautifulSoup:
        """Parse HTML with lxml."""
        return BeautifulSoup(html, 'lxml')

    @staticmethod
    def extract_section(soup: BeautifulSoup, name: str) -> Optional[str]:
        """
        Find the text of a named section by probing SECTION_STRATEGIES in order.

        Args:
            soup: Parsed page
            name: Section name such as "about" or "skills"

        Returns:
            Text of the first strategy that matched, or None
        """
        for strategy in HTMLParser.SECTION_STRATEGIES:
            text = strategy(soup, name)
            if text:
                return text
        return None

    @staticmethod
    def extract_tagged(soup: BeautifulSoup, attribute: str) -> Dict[str, str]:
        """
        Collect every element carrying `attribute` into a key -> text mapping.
        The first element for a given key wins.

        Args:
            soup: Parsed page
            attribute: Attribute name, e.g. "data-project"

        Returns:
            Mapping of attribute value to element text
        """
        entries: Dict[str, str] = {}
        for element in soup.select(f'[{attribute}]'):
            key = element.get(attribute)
            text = _element_text(element)
            if key and text and key not in entries:
                entries[key] = text
        return entries

    @staticmethod
    def visible_text(html: str) -> Optional[str]:
        """Whole-page visible text, used when no tagged content is found."""
        soup = HTMLParser.parse(html)
        for tag in soup(HTMLParser.INVISIBLE_TAGS):
            tag.decompose()
        body = soup.body or soup
        return _clean_text(body.get_text(separator=' ', strip=True))

    @classmethod
    def tag_patterns(cls, kind: str) -> List[re.Pattern]:
        """
        Ordered patterns for elements hinting at `kind` ("section", "project", "contact").

        Matches, in order: data-<kind>="key", a class of the form <kind>-key,
        and an id of the form <kind>-key.
        """
        kind = re.escape(kind)
        return [
            re.compile(cls._OPEN + rf'\bdata-{kind}="(?P<key>[^"]*)"' + cls._BODY, re.IGNORECASE),
            re.compile(cls._OPEN + rf'\bclass="[^"]*?\b{kind}-(?P<key>[\w-]+)[^"]*"' + cls._BODY, re.IGNORECASE),
            re.compile(cls._OPEN + rf'\bid="{kind}-(?P<key>[\w-]+)"' + cls._BODY, re.IGNORECASE),
        ]

    @staticmethod
    def strip_tags(fragment: str) -> Optional[str]:
        """Drop tags, decode entities and collapse whitespace."""
        text = HTMLParser._tag_pattern.sub(' ', fragment)
        return _clean_text(html_lib.unescape(text))

    @staticmethod
    def extract_tagged_regex(html: str, kind: str) -> Dict[str, str]:
        """
        Regex extraction over raw HTML.

        Every pattern runs over the whole document and matches are accumulated
        into one mapping. A later match overwrites an earlier one for the same
        key, both within a pattern and across patterns.

        Args:
            html: Raw HTML
            kind: "section", "project" or "contact"

        Returns:
            Mapping of key to cleaned text
        """
        entries: Dict[str, str] = {}
        for pattern in HTMLParser.tag_patterns(kind):
            for match in pattern.finditer(html):
                key = match.group('key').strip()
                text = HTMLParser.strip_tags(match.group('body'))
                if key and text:
                    entries[key] = text
        return entries
