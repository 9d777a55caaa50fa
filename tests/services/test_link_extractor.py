from unittest.mock import patch

import pytest

from linkscout.exceptions import HtmlParseError
from linkscout.services.link_extractor import LinkExtractor, extract_links, parse_document


def _links(html):
    return list(extract_links(parse_document(html)))


def test_reads_href_and_src_of_followable_tags():
    html = """
    <html><head>
      <link rel="stylesheet" href="/style.css">
      <script src="https://cdn.test/app.js"></script>
    </head><body>
      <a href="/page2">two</a>
      <iframe src="https://embed.test/frame"></iframe>
      <frame src="/frame.html">
    </body></html>
    """
    assert _links(html) == [
        "/style.css",
        "https://cdn.test/app.js",
        "/page2",
        "https://embed.test/frame",
        "/frame.html",
    ]


def test_ignores_other_tags_and_wrong_attributes():
    html = """
    <img src="/img.png">
    <a name="anchor-only">no href</a>
    <a src="/not-an-href">x</a>
    <script>var inline = 1;</script>
    <div href="/div"></div>
    """
    assert _links(html) == []


def test_depth_first_document_order():
    html = """
    <div><a href="/1"><span><a href="/2"></a></span></a></div>
    <div><script src="/3"></script></div>
    <a href="/4"></a>
    """
    assert _links(html) == ["/1", "/2", "/3", "/4"]


def test_values_are_returned_unresolved():
    assert _links('<a href="../up?q=1#frag">x</a>') == ["../up?q=1#frag"]


def test_duplicates_are_preserved():
    assert _links('<a href="/same"></a><a href="/same"></a>') == ["/same", "/same"]


def test_sequence_is_not_restartable():
    links = extract_links(parse_document('<a href="/x"></a>'))
    assert list(links) == ["/x"]
    assert list(links) == []


def test_parse_failure_is_wrapped():
    with patch("linkscout.services.link_extractor.BeautifulSoup", side_effect=TypeError("bad")):
        with pytest.raises(HtmlParseError) as excinfo:
            LinkExtractor().parse("<html>", "https://a.test/")
    assert "https://a.test/" in str(excinfo.value)
