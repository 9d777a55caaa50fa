import os
import logging
from pathlib import Path
from typing import Optional

try:
	from dotenv import load_dotenv
except ImportError:
	logging.warning("python-dotenv not available; using environment variables only")
else:
	loaded = load_dotenv()
	if not loaded and Path(".env").exists():
		raise RuntimeError(".env file present but failed to load")

DEFAULT_DENYLIST_KEYWORDS = [
	"google.com",
	"msn.com",
	"github.com",
	"gitlab.com",
	"yahoo",
	"adtech",
	"ads.",
	"discord.gg",
	"discord.com",
	"yimg.com",
	"ytimg",
]

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def parse_bool(raw) -> bool:
	"""Accept a real bool or one of the usual true/false words; anything else is a ValueError."""
	if isinstance(raw, bool):
		return raw
	if isinstance(raw, str):
		value = raw.strip().lower()
		if value in _TRUE_VALUES:
			return True
		if value in _FALSE_VALUES:
			return False
	raise ValueError(f"expected a boolean, got {raw!r}")


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def get_optional_float_env(name: str) -> Optional[float]:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return None
	try:
		return float(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return None


def get_bool_env(name: str, default: bool) -> bool:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return parse_bool(raw)
	except ValueError:
		logging.error("Invalid %s: %r", name, raw)
		return default


def get_list_env(name: str, default: list[str]) -> list[str]:
	"""Comma-separated list; blank items are dropped."""
	raw = os.getenv(name)
	if raw is None or raw.strip() == "":
		return list(default)
	return [item.strip() for item in raw.split(",") if item.strip()]


USER_AGENT = get_str_env("USER_AGENT", "LinkScout/0.1")
HTTP_TIMEOUT = get_optional_float_env("HTTP_TIMEOUT")
MAX_CONCURRENT = get_int_env("LINKSCOUT_MAX_CONCURRENT", 5)
BLOCKLIST_FILE = get_str_env("LINKSCOUT_BLOCKLIST_FILE", "cleaned_hosts.txt")
OUTPUT_DIR = get_str_env("LINKSCOUT_OUTPUT_DIR", ".")


def denylist_keywords() -> list[str]:
	return get_list_env("LINKSCOUT_DENYLIST_KEYWORDS", DEFAULT_DENYLIST_KEYWORDS)


def snapshot_every_page() -> bool:
	return get_bool_env("LINKSCOUT_SNAPSHOT_EVERY_PAGE", True)


def log_level() -> str:
	return (os.getenv("LINKSCOUT_LOG_LEVEL", "INFO") or "INFO").strip().upper()
