from unittest.mock import Mock

import pytest
import requests

from linkscout.container import Container
from linkscout.domain.blocklist import Blocklist
from linkscout.services.link_collector import LinkCollector


@pytest.fixture
def container(tmp_path):
    blocklist_file = tmp_path / "cleaned_hosts.txt"
    blocklist_file.write_text("blocked.test\nads.test\n")
    container = Container()
    container.config.blocklist_file.from_value(str(blocklist_file))
    container.config.output_dir.from_value(str(tmp_path))
    container.config.user_agent.from_value("TestBot/1.0")
    container.config.max_concurrent.from_value(3)
    return container


def test_container_creates_services(container):
    http_service = container.http_service()
    assert http_service.user_agent == "TestBot/1.0"
    assert container.page_fetcher() is container.page_fetcher()

    blocklist = container.blocklist()
    assert isinstance(blocklist, Blocklist)
    assert blocklist.contains("blocked.test")


def test_link_collector_is_fresh_per_crawl(container):
    first = container.link_collector()
    second = container.link_collector()
    assert isinstance(first, LinkCollector)
    assert first is not second
    assert first.state is not second.state
    assert first.gate.limit == 3
    assert first.blocklist is second.blocklist


def test_report_writer_uses_configured_keywords(container, tmp_path):
    container.config.denylist_keywords.from_value(["tracker"])
    writer = container.report_writer()
    assert writer.denylist_keywords == ("tracker",)
    assert writer.output_dir == str(tmp_path)


def test_fetcher_can_be_overridden(container):
    fake = Mock()
    container.page_fetcher.override(fake)
    try:
        assert container.link_collector().fetcher is fake
    finally:
        container.page_fetcher.reset_override()


def test_missing_blocklist_file_raises(tmp_path):
    container = Container()
    container.config.blocklist_file.from_value(str(tmp_path / "absent.txt"))
    with pytest.raises(FileNotFoundError):
        container.blocklist()


def test_http_service_uses_one_shared_session(container):
    session = container.http_session()
    assert isinstance(session, requests.Session)
    assert container.http_session() is session
    assert container.http_service().http_client == session.get
    assert container.http_service().http_client.__self__ is session
