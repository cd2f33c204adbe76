"""Non-reactive page info for server and universal code paths.

``page_info()`` validates the current page once and hands back an
``update_params()`` helper bound to the raw page state, for building
redirect targets and links without any reactive machinery::

    info = page_info(generator, "/users/[id]", {"id": "7"}, "?tab=posts")
    info.current.params            # {"id": 7}
    info.update_params(search_params={"tab": "likes"}).url
    # '/users/7?tab=likes'
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pathwise.generator import GenerationResult, UrlGenerator
from pathwise.http.query import decode_query
from pathwise.pages.source import PageState


@dataclass(frozen=True, slots=True)
class PageInfo:
    """Validated view of one page plus an update helper."""

    generator: UrlGenerator
    address: str
    page: PageState
    current: GenerationResult = field(init=False)

    def __post_init__(self) -> None:
        current = self.generator.generate(
            self.address,
            dict(self.page.params),
            decode_query(self.page.search),
        )
        object.__setattr__(self, "current", current)

    def update_params(
        self,
        *,
        params: Mapping[str, Any] | None = None,
        search_params: Mapping[str, Any] | None = None,
    ) -> GenerationResult:
        """Merge a partial update into the raw page state and regenerate."""
        return self.generator.merge_and_generate(
            self.address,
            self.page.params,
            self.page.search,
            params=params,
            search_params=search_params,
        )


def page_info(
    generator: UrlGenerator,
    address: str,
    params: Mapping[str, str],
    search: str = "",
) -> PageInfo:
    """Build a ``PageInfo`` for *address* from raw page params and query."""
    return PageInfo(generator=generator, address=address, page=PageState(params, search))
