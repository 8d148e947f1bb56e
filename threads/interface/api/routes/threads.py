"""Thread routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import BaseModel, Field

from threads.application.usecase.auth import GetCurrentUserUseCase
from threads.application.usecase.thread import (
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
    DeleteThreadRequest,
    DeleteThreadResponse,
    DeleteThreadUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    ListThreadsRequest,
    ListThreadsResponse,
    ListThreadsUseCase,
    ReplyToThreadRequest,
    ReplyToThreadResponse,
    ReplyToThreadUseCase,
)
from threads.config import AuthSettings, PaginationSettings
from threads.interface.api.auth import require_profile
from threads.interface.error import to_http_exception

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class CreateThreadAPIRequest(BaseModel):
    """API request for posting a thread."""

    text: str = Field(min_length=3, max_length=10000)
    community_id: UUID | None = None


class ReplyAPIRequest(BaseModel):
    """API request for replying to a thread."""

    text: str = Field(min_length=3, max_length=10000)


@router.get("", response_model=ListThreadsResponse)
async def list_threads(
    list_threads_use_case: FromDishka[ListThreadsUseCase],
    pagination: FromDishka[PaginationSettings],
    page_number: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1, le=100),
) -> ListThreadsResponse:
    """Home feed: top-level threads, newest first.

    Each thread comes with its author, community and direct replies.
    """
    size = min(page_size or pagination.threads_page_size, pagination.max_page_size)
    try:
        return await list_threads_use_case.execute(
            ListThreadsRequest(page_number=page_number, page_size=size)
        )
    except Exception as e:
        raise to_http_exception(e, "fetch threads") from e


@router.post("", response_model=CreateThreadResponse, status_code=status.HTTP_201_CREATED)
async def create_thread(
    body: CreateThreadAPIRequest,
    request: Request,
    create_thread_use_case: FromDishka[CreateThreadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> CreateThreadResponse:
    """Post a new thread, optionally to a community.

    Requires an onboarded user.
    """
    user = await require_profile(request, get_current_user_use_case, auth_settings)

    try:
        return await create_thread_use_case.execute(
            CreateThreadRequest(
                text=body.text,
                author_id=user.id,
                community_id=str(body.community_id) if body.community_id else None,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create thread") from e


@router.get("/{thread_id}", response_model=GetThreadResponse)
async def get_thread(
    thread_id: UUID,
    get_thread_use_case: FromDishka[GetThreadUseCase],
) -> GetThreadResponse:
    """A thread with its whole nested reply tree."""
    try:
        return await get_thread_use_case.execute(
            GetThreadRequest(thread_id=str(thread_id))
        )
    except Exception as e:
        raise to_http_exception(e, "fetch thread") from e


@router.post(
    "/{thread_id}/replies",
    response_model=ReplyToThreadResponse,
    status_code=status.HTTP_201_CREATED,
)
async def reply_to_thread(
    thread_id: UUID,
    body: ReplyAPIRequest,
    request: Request,
    reply_use_case: FromDishka[ReplyToThreadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> ReplyToThreadResponse:
    """Add a comment to a thread (or to a reply)."""
    user = await require_profile(request, get_current_user_use_case, auth_settings)

    try:
        return await reply_use_case.execute(
            ReplyToThreadRequest(
                thread_id=str(thread_id), text=body.text, author_id=user.id
            )
        )
    except Exception as e:
        raise to_http_exception(e, "add comment to thread") from e


@router.delete("/{thread_id}", response_model=DeleteThreadResponse)
async def delete_thread(
    thread_id: UUID,
    request: Request,
    delete_thread_use_case: FromDishka[DeleteThreadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> DeleteThreadResponse:
    """Delete a thread with all its replies. Only the author may do this."""
    user = await require_profile(request, get_current_user_use_case, auth_settings)

    try:
        return await delete_thread_use_case.execute(
            DeleteThreadRequest(thread_id=str(thread_id), requester_id=user.id)
        )
    except Exception as e:
        raise to_http_exception(e, "delete thread") from e
