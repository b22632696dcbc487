from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Mapping, Optional, TypeVar

from schemas.common import KeywordSet


MAX_KEYWORDS = 10

T = TypeVar("T")


class OrderedSet(Generic[T]):
    """Insertion-ordered set with an optional identity key.

    Membership is decided by key(item); the first item seen for a key wins.
    """

    def __init__(self, items: Iterable[T] = (), *, key: Optional[Callable[[T], Any]] = None) -> None:
        self._key = key or (lambda x: x)
        self._seen: set[Any] = set()
        self._items: list[T] = []
        for item in items:
            self.add(item)

    def add(self, item: T) -> bool:
        k = self._key(item)
        if k in self._seen:
            return False
        self._seen.add(k)
        self._items.append(item)
        return True

    def __contains__(self, item: object) -> bool:
        return self._key(item) in self._seen  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> list[T]:
        return list(self._items)


def _ranked_keywords(entries: Any) -> list[str]:
    if not isinstance(entries, list):
        return []
    out: list[str] = []
    for entry in entries:
        kw = entry.get("keyword") if isinstance(entry, Mapping) else getattr(entry, "keyword", None)
        if isinstance(kw, str) and kw.strip():
            out.append(kw)
    return out


def extract_keywords(keywords: KeywordSet | Mapping[str, Any] | None) -> list[str]:
    """Flatten analyzer keyword data into an ordered list of at most MAX_KEYWORDS strings.

    Primary keywords come first, then secondary, each in the given order.
    Duplicates are kept; callers de-duplicate where they need to.
    """
    if keywords is None:
        return []

    if isinstance(keywords, KeywordSet):
        primary = keywords.recommended.primary
        secondary = keywords.recommended.secondary
    elif isinstance(keywords, Mapping):
        recommended = keywords.get("recommended")
        if not isinstance(recommended, Mapping):
            return []
        primary = recommended.get("primary")
        secondary = recommended.get("secondary")
    else:
        return []

    flat = _ranked_keywords(primary) + _ranked_keywords(secondary)
    return flat[:MAX_KEYWORDS]
