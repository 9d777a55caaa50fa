from typing import Optional

from linkscout.config import parse_bool
from linkscout.domain.config import CrawlSettings


class CrawlerConfigParser:
    """Parse a YAML dict into `CrawlSettings`.

    Responsibility: schema/validation for YAML settings files.
    It does NOT perform filesystem IO.
    """

    def parse(self, data: dict, *, config_path: Optional[str] = None) -> Optional[CrawlSettings]:
        seed_url = data.get("seed_url")
        if not seed_url:
            return None

        max_concurrent = data.get("max_concurrent")
        if max_concurrent is not None:
            if isinstance(max_concurrent, bool) or not isinstance(max_concurrent, int) or max_concurrent < 1:
                raise ValueError(f"max_concurrent must be a positive integer, got {max_concurrent!r}")

        keywords = data.get("denylist_keywords")
        if keywords is not None:
            if not isinstance(keywords, list):
                raise ValueError("denylist_keywords must be a list of strings")
            keywords = [str(k) for k in keywords if str(k).strip()]

        snapshot = data.get("snapshot_every_page")
        if snapshot is not None:
            try:
                snapshot = parse_bool(snapshot)
            except ValueError as e:
                raise ValueError(f"snapshot_every_page: {e}") from e

        return CrawlSettings(
            seed_url=str(seed_url),
            max_concurrent=max_concurrent,
            blocklist_file=data.get("blocklist_file"),
            output_dir=data.get("output_dir"),
            denylist_keywords=keywords,
            snapshot_every_page=snapshot,
            config_path=config_path,
        )
