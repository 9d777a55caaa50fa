from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CrawlSettings:
    """Crawl settings loaded from a YAML file.

    Fields left as None fall back to the environment-driven defaults in
    `linkscout.config`.
    """

    seed_url: str
    max_concurrent: Optional[int] = None
    blocklist_file: Optional[str] = None
    output_dir: Optional[str] = None
    denylist_keywords: Optional[list[str]] = None
    snapshot_every_page: Optional[bool] = None
    config_path: Optional[str] = field(default=None, compare=False)
