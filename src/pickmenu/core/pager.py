"""Page layout for menu entries."""

from dataclasses import dataclass

from pickmenu.utils.constants import CHROME_ROWS, CHROME_ROWS_WITH_TITLE
from pickmenu.utils.exceptions import ViewportTooSmallError


@dataclass
class PageState:
    """Paging over an ordered entry list.

    Attributes:
        entry_count: Number of entries being paged
        page_size: Maximum rows visible at once
        current_page: 0-indexed page on screen
    """

    entry_count: int
    page_size: int
    current_page: int = 0

    @property
    def last_page(self) -> int:
        """Index of the last page (0 when everything fits on one page)."""
        # ceil((entry_count - page_size) / page_size), clamped at 0
        return max(0, -(-(self.entry_count - self.page_size) // self.page_size))

    @property
    def page_count(self) -> int:
        return self.last_page + 1

    def first_index_of_page(self, page: int) -> int:
        return self.page_size * page

    def entries_on_page(self, page: int) -> int:
        if page < self.last_page:
            return self.page_size
        return self.entry_count - self.page_size * self.last_page

    @property
    def rows_on_current_page(self) -> int:
        return self.entries_on_page(self.current_page)

    def locate(self, index: int) -> tuple[int, int]:
        """Map a global entry index to (page, row)."""
        if not 0 <= index < self.entry_count:
            raise IndexError(f"entry index {index} out of range")
        return divmod(index, self.page_size)

    def global_index(self, row: int) -> int:
        """Map a row on the current page to a global entry index."""
        return self.first_index_of_page(self.current_page) + row

    def reset(self):
        """Go back to the first page."""
        self.current_page = 0

    def clamp_row(self, row: int) -> int:
        """Clamp a row into the rows present on the current page."""
        return max(0, min(row, self.rows_on_current_page - 1))

    def indicator(self) -> str:
        """Page indicator text, 1-based."""
        return f"{self.current_page + 1}/{self.last_page + 1}"


def page_size_for(viewport_height: int, has_title: bool) -> int:
    """Rows left for entries once the title and footer are drawn."""
    return viewport_height - (CHROME_ROWS_WITH_TITLE if has_title else CHROME_ROWS)


def layout(entry_count: int, viewport_height: int, has_title: bool) -> PageState:
    """Compute the page layout for a menu level.

    Raises:
        ViewportTooSmallError: if not even one entry row fits
    """
    page_size = page_size_for(viewport_height, has_title)
    if page_size < 1:
        raise ViewportTooSmallError(
            f"Terminal height {viewport_height} leaves no room for menu entries",
            height=viewport_height,
        )
    return PageState(entry_count=entry_count, page_size=page_size)
