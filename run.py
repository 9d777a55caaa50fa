import argparse
import logging
import os
import sys
from typing import Optional

from linkscout import config as env
from linkscout.container import Container
from linkscout.exceptions import InvalidSeedError
from linkscout.services.config_file_store import ConfigFileStore
from linkscout.services.crawler_config_parser import CrawlerConfigParser
from linkscout.services.hosts_cleaner import clean_hosts_file

logger = logging.getLogger("linkscout")

DEFAULT_SEED_URL = "https://example.com"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linkscout",
        description="Recursive link collector that reports every host a site reaches.",
    )
    sub = parser.add_subparsers(dest="command")

    crawl = sub.add_parser("crawl", help="Crawl from a start URL and dump the hosts found")
    crawl.add_argument("--url", default=None, help=f"Start URL (default: {DEFAULT_SEED_URL})")
    crawl.add_argument("--max-concurrent", type=int, default=None, help="Maximum simultaneous fetches (default: 5)")
    crawl.add_argument("--blocklist", default=None, help="Prepared blocklist file (default: cleaned_hosts.txt)")
    crawl.add_argument("--output-dir", default=None, help="Directory for the dump files (default: .)")
    crawl.add_argument("--config", default=None, help="YAML file with crawl settings")
    crawl.add_argument(
        "--no-snapshots",
        dest="snapshots",
        action="store_false",
        default=None,
        help="Only write the domain dump once the crawl is finished",
    )
    crawl.add_argument("--verbose", action="store_true", default=False, help="Enable debug logging")

    clean = sub.add_parser("clean-hosts", help="Build a blocklist file from a raw hosts file")
    clean.add_argument("--input", default="hosts.txt", help="Raw hosts file (default: hosts.txt)")
    clean.add_argument("--output", default="cleaned_hosts.txt", help="Blocklist to write (default: cleaned_hosts.txt)")
    clean.add_argument("--verbose", action="store_true", default=False, help="Enable debug logging")
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, env.log_level(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _apply_settings(container: Container, args) -> Optional[str]:
    """Push YAML and command-line settings into the container; CLI wins.

    Returns the seed URL, or None if a requested settings file is unusable.
    """
    seed_url = None
    if args.config:
        store = ConfigFileStore(configs_dir=os.getcwd())
        data = store.load_yaml_dict(args.config)
        if data is None:
            logger.error("Config %s not found or not a YAML mapping", args.config)
            return None
        try:
            settings = CrawlerConfigParser().parse(data, config_path=args.config)
        except ValueError as e:
            logger.error("Invalid config %s: %s", args.config, e)
            return None
        if settings is None:
            logger.error("Config %s has no seed_url", args.config)
            return None
        seed_url = settings.seed_url
        if settings.max_concurrent is not None:
            container.config.max_concurrent.from_value(settings.max_concurrent)
        if settings.blocklist_file is not None:
            container.config.blocklist_file.from_value(settings.blocklist_file)
        if settings.output_dir is not None:
            container.config.output_dir.from_value(settings.output_dir)
        if settings.denylist_keywords is not None:
            container.config.denylist_keywords.from_value(settings.denylist_keywords)
        if settings.snapshot_every_page is not None:
            container.config.snapshot_every_page.from_value(settings.snapshot_every_page)

    if args.url:
        seed_url = args.url
    if args.max_concurrent is not None:
        container.config.max_concurrent.from_value(args.max_concurrent)
    if args.blocklist:
        container.config.blocklist_file.from_value(args.blocklist)
    if args.output_dir:
        container.config.output_dir.from_value(args.output_dir)
    if args.snapshots is not None:
        container.config.snapshot_every_page.from_value(args.snapshots)
    return seed_url or DEFAULT_SEED_URL


def run_crawl(args, container: Container) -> int:
    seed_url = _apply_settings(container, args)
    if seed_url is None:
        return 1

    try:
        collector = container.link_collector()
    except OSError as e:
        logger.error("Could not load blocklist %s: %s", container.config.blocklist_file(), e)
        return 1
    except ValueError as e:
        logger.error("Invalid crawl settings: %s", e)
        return 1

    try:
        collector.collect(seed_url)
    except InvalidSeedError as e:
        logger.error("Error parsing start URL: %s", e)
        return 1

    print("All links collected.")
    return 0


def run_clean_hosts(args) -> int:
    try:
        clean_hosts_file(args.input, args.output)
    except OSError as e:
        logger.error("Could not clean %s: %s", args.input, e)
        return 1
    return 0


def main(argv=None, container: Optional[Container] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 2

    _configure_logging(args.verbose)
    if args.command == "clean-hosts":
        return run_clean_hosts(args)
    return run_crawl(args, container or Container())


if __name__ == '__main__':
    sys.exit(main())
