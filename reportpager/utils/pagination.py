import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, NamedTuple
from urllib.parse import urlencode

from reportpager.utils.exceptions import InvalidPageNumberError

logger = logging.getLogger(__name__)

DEFAULT_PAGE_LEN = 1
PAGE_KEY = "page"

QueryPairs = tuple[tuple[str, str], ...]


class PageWindow(NamedTuple):
    pages: int
    next: int
    previous: int


def page_window(page_len: int, total_records: int, current_page: int) -> PageWindow:
    """Compute total pages and the neighbouring page numbers.

    A non-positive ``page_len`` falls back to ``DEFAULT_PAGE_LEN``. An empty
    result set still has one page. ``current_page`` outside ``1..pages``
    raises ``InvalidPageNumberError``; 0 in ``next``/``previous`` means there
    is no such page.
    """
    page_len = effective_page_len(page_len)

    pages = max(1, -(-total_records // page_len))
    if current_page > pages or current_page < 1:
        raise InvalidPageNumberError(requested=current_page, max=pages)

    next_page = current_page + 1 if current_page < pages else 0
    previous_page = current_page - 1 if current_page > 1 else 0
    return PageWindow(pages=pages, next=next_page, previous=previous_page)


def effective_page_len(page_len: int) -> int:
    if page_len <= 0:
        logger.debug(f"Длина страницы заменена значением по умолчанию. page_len={page_len} default={DEFAULT_PAGE_LEN}")
        return DEFAULT_PAGE_LEN
    return page_len


def normalize_page(raw: Any) -> int:
    """Page number from a raw query value; missing, junk or < 1 becomes 1."""
    if raw is None or isinstance(raw, bool):
        return 1
    try:
        page = int(str(raw).strip())
    except ValueError:
        return 1
    return page if page >= 1 else 1


def _query_pairs(params: Any) -> QueryPairs:
    if params is None:
        return ()

    if hasattr(params, "multi_items"):
        items: Iterable = params.multi_items()
    elif isinstance(params, Mapping):
        items = []
        for key, value in params.items():
            if isinstance(value, (list, tuple)):
                items.extend((key, v) for v in value)
            else:
                items.append((key, value))
    else:
        items = params

    return tuple((str(k), str(v)) for k, v in items)


def build_link(target_page: int, params: Any) -> str:
    """Query string (no leading ``?``) pointing at ``target_page``.

    Every pair except ``page`` is kept as-is, ``page`` is set to the target
    and keys are sorted so the output does not depend on input order.
    Returns "" for the 0 sentinel.
    """
    if target_page == 0:
        return ""

    by_key: dict[str, list[str]] = {}
    for key, value in _query_pairs(params):
        if key == PAGE_KEY:
            continue
        by_key.setdefault(key, []).append(value)
    by_key[PAGE_KEY] = [str(target_page)]

    pairs = [(key, value) for key in sorted(by_key) for value in by_key[key]]
    return urlencode(pairs)


@dataclass(frozen=True)
class Pagination:
    page_no: int
    pages: int
    next: int
    previous: int

    page_len: int = field(default=DEFAULT_PAGE_LEN, compare=False, repr=False)
    _params: QueryPairs = field(default=(), compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.page_len < 1:
            raise ValueError("page_len must be >= 1")
        if self.pages < 1:
            raise ValueError("pages must be >= 1")
        if self.page_no < 1 or self.page_no > self.pages:
            raise InvalidPageNumberError(requested=self.page_no, max=self.pages)
        if self.next != (self.page_no + 1 if self.page_no < self.pages else 0):
            raise ValueError("next must be page_no + 1, or 0 on the last page")
        if self.previous != (self.page_no - 1 if self.page_no > 1 else 0):
            raise ValueError("previous must be page_no - 1, or 0 on the first page")

    @classmethod
    def create(
        cls,
        page_len: int,
        total_records: int,
        current_page: int,
        params: Any = None,
    ) -> "Pagination":
        page_len = effective_page_len(page_len)
        window = page_window(page_len, total_records, current_page)
        return cls(
            page_no=current_page,
            pages=window.pages,
            next=window.next,
            previous=window.previous,
            page_len=page_len,
            _params=_query_pairs(params),
        )

    @property
    def limit(self) -> int:
        return self.page_len

    @property
    def offset(self) -> int:
        return (self.page_no - 1) * self.page_len

    def next_url(self) -> str:
        return build_link(self.next, self._params)

    def previous_url(self) -> str:
        return build_link(self.previous, self._params)
