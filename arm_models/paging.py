"""
Pagination continuation for list results.

List operations return one page at a time; a page carries an opaque
continuation (usually ``nextLink``) when more pages exist. The token is
passed back to a caller-supplied fetch function untouched. No HTTP is done
here: the transport belongs to whoever supplies ``fetch``.
"""

import logging
from dataclasses import dataclass
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    ClassVar,
    Generic,
    Iterator,
    List,
    Optional,
    TypeVar,
)

logger = logging.getLogger(__name__)


class Continuable:
    """
    Mixin for list-result records.

    ``continuation_field`` names the attribute holding the next-link, or is
    ``None`` for list results that never page. ``items_field`` names the
    attribute holding the page's items.
    """

    continuation_field: ClassVar[Optional[str]] = "next_link"
    items_field: ClassVar[str] = "value"

    def continuation(self) -> Optional[str]:
        """Return the continuation token, or None when this is the last page."""
        field = type(self).continuation_field
        if field is None:
            return None
        value = getattr(self, field, None)
        return value or None

    def page_items(self) -> List[Any]:
        return list(getattr(self, type(self).items_field, None) or [])


@dataclass(frozen=True)
class PagerState:
    """Either the initial request or a follow-up carrying a continuation."""

    continuation: Optional[str] = None

    @property
    def is_initial(self) -> bool:
        return self.continuation is None

    @classmethod
    def initial(cls) -> "PagerState":
        return cls()

    @classmethod
    def more(cls, continuation: str) -> "PagerState":
        return cls(continuation)


P = TypeVar("P", bound=Continuable)


class Pager(Generic[P]):
    """
    Iterate over every page (or every item) of a list operation.

    Args:
        fetch: Called with None for the first page and with the previous
            page's continuation afterwards
        continuation: Resume from a stored continuation instead of the
            first page
    """

    def __init__(
        self,
        fetch: Callable[[Optional[str]], P],
        continuation: Optional[str] = None,
    ) -> None:
        self._fetch = fetch
        self._start = (
            PagerState.more(continuation) if continuation else PagerState.initial()
        )

    def pages(self) -> Iterator[P]:
        state = self._start
        while True:
            logger.debug(
                "Fetching page", extra={"continuation": state.continuation}
            )
            page = self._fetch(state.continuation)
            yield page
            continuation = page.continuation()
            if continuation is None:
                return
            state = PagerState.more(continuation)

    def __iter__(self) -> Iterator[Any]:
        for page in self.pages():
            yield from page.page_items()


class AsyncPager(Generic[P]):
    """Async counterpart of ``Pager`` for coroutine fetch functions."""

    def __init__(
        self,
        fetch: Callable[[Optional[str]], Awaitable[P]],
        continuation: Optional[str] = None,
    ) -> None:
        self._fetch = fetch
        self._start = (
            PagerState.more(continuation) if continuation else PagerState.initial()
        )

    async def pages(self) -> AsyncIterator[P]:
        state = self._start
        while True:
            logger.debug(
                "Fetching page", extra={"continuation": state.continuation}
            )
            page = await self._fetch(state.continuation)
            yield page
            continuation = page.continuation()
            if continuation is None:
                return
            state = PagerState.more(continuation)

    async def __aiter__(self) -> AsyncIterator[Any]:
        async for page in self.pages():
            for item in page.page_items():
                yield item
