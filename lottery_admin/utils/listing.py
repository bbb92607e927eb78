"""In-memory search, filtering and pagination over a fetched collection.

A ``ListView`` holds one fetched copy of a table. ``refresh()`` reloads it
from the store; everything else (search term, exact-match filters, current
page) is applied to that copy without another round trip. Changing the
items, the search term or any filter selects page 1 again.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, Generic, TypeVar

from lottery_admin.errors import ValidationError

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10

# Filter values meaning "no filter" (the dashboard's "All" option).
_UNFILTERED = {None, "", "all"}


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


class ListView(Generic[T]):
    """Explicit state container for one dashboard list."""

    def __init__(
        self,
        loader: Callable[[], Sequence[T]],
        *,
        search_fields: Sequence[Callable[[T], Any]] = (),
        filter_fields: Mapping[str, Callable[[T], Any]] | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be positive")
        self._loader = loader
        self._search_fields = tuple(search_fields)
        self._filter_fields = dict(filter_fields or {})
        self.page_size = page_size

        self._items: list[T] = []
        self._search = ""
        self._filters: dict[str, str] = {}
        self._page = 1

    # -- state -----------------------------------------------------------

    def refresh(self) -> "ListView[T]":
        """Re-fetch the collection; call after every successful mutation."""

        self._items = list(self._loader())
        self._page = 1
        return self

    @property
    def items(self) -> list[T]:
        return list(self._items)

    @property
    def search_term(self) -> str:
        return self._search

    @property
    def filters(self) -> dict[str, str]:
        return dict(self._filters)

    @property
    def page(self) -> int:
        return self._page

    def set_search(self, term: str | None) -> "ListView[T]":
        self._search = term or ""
        self._page = 1
        return self

    def set_filter(self, name: str, value: Any) -> "ListView[T]":
        if name not in self._filter_fields:
            raise KeyError(f"Unknown filter: {name}")
        text = _as_text(value)
        if text in _UNFILTERED:
            self._filters.pop(name, None)
        else:
            self._filters[name] = text  # type: ignore[assignment]
        self._page = 1
        return self

    def go_to(self, page: int) -> "ListView[T]":
        self._page = min(max(int(page), 1), max(self.total_pages, 1))
        return self

    # -- derived -----------------------------------------------------------

    def _matches_search(self, item: T) -> bool:
        needle = self._search.lower()
        for field in self._search_fields:
            text = _as_text(field(item))
            if text is not None and needle in text.lower():
                return True
        return False

    @property
    def filtered(self) -> list[T]:
        result: Iterable[T] = self._items
        for name, wanted in self._filters.items():
            getter = self._filter_fields[name]
            result = [item for item in result if _as_text(getter(item)) == wanted]
        if self._search:
            result = [item for item in result if self._matches_search(item)]
        return list(result)

    @property
    def total(self) -> int:
        return len(self.filtered)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size)

    @property
    def page_items(self) -> list[T]:
        start = (self._page - 1) * self.page_size
        return self.filtered[start : start + self.page_size]

    def page_info(self) -> dict[str, int]:
        """Numbers for the "Showing X to Y of Z results" footer."""

        total = self.total
        start = (self._page - 1) * self.page_size
        return {
            "page": self._page,
            "total_pages": self.total_pages,
            "total": total,
            "page_size": self.page_size,
            "start": start + 1 if total else 0,
            "end": min(start + self.page_size, total),
        }


def apply_query(
    view: ListView[T],
    args: Mapping[str, str],
    filters: Iterable[str] = (),
) -> ListView[T]:
    """Apply ``q``, the named exact-match filters and ``page`` from query args."""

    view.set_search(args.get("q"))
    for name in filters:
        if name in args:
            view.set_filter(name, args.get(name))

    raw_page = (args.get("page") or "").strip()
    if raw_page:
        try:
            page = int(raw_page)
        except ValueError as e:
            raise ValidationError("page must be an integer") from e
        view.go_to(page)
    return view
