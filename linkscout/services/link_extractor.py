from typing import Iterator

from bs4 import BeautifulSoup, Tag

from linkscout.exceptions import HtmlParseError

# Tag name -> attribute naming the followable resource.
LINK_ATTRIBUTES = {
    "a": "href",
    "link": "href",
    "iframe": "src",
    "frame": "src",
    "script": "src",
}


def parse_document(body: str, url: str = "") -> BeautifulSoup:
    try:
        return BeautifulSoup(body, "html.parser")
    except Exception as e:
        raise HtmlParseError(url, e) from e


def extract_links(document: BeautifulSoup) -> Iterator[str]:
    """Yield raw link values from `document` in document order.

    The walk is depth-first and touches each node once. Only `a`/`link`
    hrefs and `iframe`/`frame`/`script` srcs are reported; values are
    returned exactly as written, resolution is left to the caller.
    """
    for node in document.descendants:
        if not isinstance(node, Tag):
            continue
        attr = LINK_ATTRIBUTES.get(node.name)
        if attr is None:
            continue
        value = node.get(attr)
        if isinstance(value, str):
            yield value


class LinkExtractor:
    """Parses a page body and lists the links found in it."""

    def parse(self, body: str, url: str = "") -> BeautifulSoup:
        return parse_document(body, url)

    def extract(self, document: BeautifulSoup) -> Iterator[str]:
        return extract_links(document)
