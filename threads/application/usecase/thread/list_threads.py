"""List threads use case."""

import logfire
from pydantic import BaseModel, Field

from threads.application.usecase.base import BaseUseCase, operation
from threads.application.usecase.thread.card import ThreadCard, ThreadCardBuilder
from threads.domain.service import ThreadService
from threads.domain.value import Page


class ListThreadsRequest(BaseModel):
    """List threads request."""

    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1, le=100)


class ListThreadsResponse(BaseModel):
    """List threads response."""

    threads: list[ThreadCard]
    is_next: bool


class ListThreadsUseCase(BaseUseCase):
    """Use case for the home feed of top-level threads."""

    def __init__(
        self, thread_service: ThreadService, card_builder: ThreadCardBuilder
    ) -> None:
        """Initialize list threads use case.

        Args:
            thread_service: Thread domain service
            card_builder: Populates threads for display
        """
        self.thread_service = thread_service
        self.card_builder = card_builder

    async def execute(self, request: ListThreadsRequest) -> ListThreadsResponse:
        """Execute list threads flow.

        Returns:
            Top-level threads, newest first, with authors, communities and
            direct replies, and whether another page exists
        """
        with logfire.span(
            "list_threads.execute",
            page_number=request.page_number,
            page_size=request.page_size,
        ), operation("Error fetching threads"):
            page = Page(number=request.page_number, size=request.page_size)
            threads, is_next = await self.thread_service.list_top_level(page)
            cards = await self.card_builder.build(threads)
            return ListThreadsResponse(threads=cards, is_next=is_next)
