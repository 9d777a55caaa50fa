from typing import Iterable, Iterator


class Blocklist:
    """Immutable set of hosts that are never fetched or reported.

    Matching is exact: ``ads.example.com`` does not block
    ``cdn.ads.example.com``. The empty host is never considered blocked.
    """

    def __init__(self, hosts: Iterable[str] = ()):
        self._hosts = frozenset(h.strip() for h in hosts if h and h.strip())

    @classmethod
    def from_text(cls, text: str) -> "Blocklist":
        """Build from a newline-separated host list; blank lines are dropped."""
        return cls(text.splitlines())

    @classmethod
    def from_file(cls, path: str) -> "Blocklist":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_text(f.read())

    def contains(self, host: str) -> bool:
        return host in self._hosts

    def __contains__(self, host: object) -> bool:
        return host in self._hosts

    def __len__(self) -> int:
        return len(self._hosts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._hosts)

    def __repr__(self):
        return f"<Blocklist hosts={len(self._hosts)}>"
