import threading

from linkscout.domain.crawl_state import CrawlState


def test_record_if_new_records_once():
    state = CrawlState()
    assert state.record_if_new("https://a.test/", "a.test")
    assert not state.record_if_new("https://a.test/", "a.test")
    assert state.visited_count == 1
    assert state.domain_count == 1
    assert "https://a.test/" in state.snapshot().visited_urls


def test_callback_runs_only_for_first_discoverer():
    state = CrawlState()
    seen = []
    state.record_if_new("https://a.test/x", "a.test", on_recorded=seen.append)
    state.record_if_new("https://a.test/x", "a.test", on_recorded=seen.append)
    assert seen == ["https://a.test/x"]


def test_domains_are_distinct_hosts():
    state = CrawlState()
    state.record_if_new("https://a.test/1", "a.test")
    state.record_if_new("https://a.test/2", "a.test")
    state.record_if_new("https://b.test/", "b.test")
    snap = state.snapshot()
    assert snap.domains == frozenset({"a.test", "b.test"})
    assert len(snap.visited_urls) == 3


def test_concurrent_discoverers_record_each_url_once():
    state = CrawlState()
    winners = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        for i in range(50):
            if state.record_if_new(f"https://a.test/{i}", "a.test"):
                winners.append(i)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(winners) == list(range(50))
    assert state.visited_count == 50


def test_frozen_snapshot_is_detached_from_later_writes():
    state = CrawlState()
    state.record_if_new("https://a.test/", "a.test")
    snap = state.snapshot()
    state.record_if_new("https://b.test/", "b.test")
    assert snap.visited_urls == frozenset({"https://a.test/"})


def test_outcome_counts():
    state = CrawlState()
    state.count_outcome("completed")
    state.count_outcome("completed")
    state.count_outcome("blocked")
    assert state.outcome_count("completed") == 2
    assert state.outcome_count("blocked") == 1
    assert state.outcome_count("fetch_failed") == 0
