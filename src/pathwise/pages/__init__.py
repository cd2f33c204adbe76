"""Pages — raw page state, its observable source, and one-shot page info."""

from pathwise.pages.info import PageInfo, page_info
from pathwise.pages.source import PageListener, PageSource, PageState

__all__ = ["PageInfo", "PageListener", "PageSource", "PageState", "page_info"]
