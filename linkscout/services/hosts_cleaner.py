"""Turn a raw hosts file into the blocklist payload the crawler loads.

A hosts file line looks like ``0.0.0.0 ads.example.com``; only the host
names survive. IP literals and localhost names are stripped, and a few
extra hosts are always appended.
"""
import logging
import re
from typing import Iterable

logger = logging.getLogger(__name__)

DEFAULT_EXTRA_HOSTS = ("google.com", "yahoo.com", "github.com")

_IP_OR_LOCALHOST = re.compile(
    r"\b(?:"
    r"\d{1,3}(?:\.\d{1,3}){3}"
    r"|(?:[0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}"
    r"|(?:[0-9a-fA-F]{1,4}:){1,7}:"
    r"|(?:[0-9a-fA-F]{1,4}:){1,6}:[0-9a-fA-F]{1,4}"
    r"|(?:[0-9a-fA-F]{1,4}:){1,5}(?::[0-9a-fA-F]{1,4}){1,2}"
    r"|(?:[0-9a-fA-F]{1,4}:){1,4}(?::[0-9a-fA-F]{1,4}){1,3}"
    r"|(?:[0-9a-fA-F]{1,4}:){1,3}(?::[0-9a-fA-F]{1,4}){1,4}"
    r"|(?:[0-9a-fA-F]{1,4}:){1,2}(?::[0-9a-fA-F]{1,4}){1,5}"
    r"|[0-9a-fA-F]{1,4}:(?::[0-9a-fA-F]{1,4}){1,6}"
    r"|:(?:(?::[0-9a-fA-F]{1,4}){1,7}|:)"
    r"|fe80:(?::[0-9a-fA-F]{0,4}){0,4}%[0-9a-zA-Z]+"
    r"|::1"
    r"|127\.0\.0\.1"
    r"|localhost"
    r")\b"
)


def _keep(line: str) -> bool:
    return line.strip() != "" and not line.startswith("::")


def clean_hosts(raw: str, extra_hosts: Iterable[str] = DEFAULT_EXTRA_HOSTS) -> list[str]:
    lines = []
    for line in raw.split("\n"):
        stripped = line.strip()
        if stripped == "" or stripped.startswith("#"):
            continue
        lines.append(stripped)

    content = _IP_OR_LOCALHOST.sub("", "\n".join(lines))
    content = content.replace(" ", "").replace("\t", "")

    hosts = [line for line in content.split("\n") if _keep(line)]
    hosts.extend(h for h in extra_hosts if _keep(h))
    return hosts


def clean_hosts_file(input_path: str, output_path: str, extra_hosts: Iterable[str] = DEFAULT_EXTRA_HOSTS) -> int:
    """Clean `input_path` into `output_path`; returns the number of hosts written."""
    with open(input_path, "r", encoding="utf-8") as f:
        raw = f.read()
    hosts = clean_hosts(raw, extra_hosts)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write("\n".join(hosts))
    logger.info("Cleaned content written to %s (%d hosts)", output_path, len(hosts))
    return len(hosts)
