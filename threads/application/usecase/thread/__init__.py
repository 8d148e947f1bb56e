"""Thread use cases."""

from .card import AuthorSummary, CommunitySummary, ThreadCard, ThreadCardBuilder
from .create_thread import (
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
)
from .delete_thread import (
    DeleteThreadRequest,
    DeleteThreadResponse,
    DeleteThreadUseCase,
)
from .get_thread import (
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    ThreadTreeNode,
)
from .list_threads import ListThreadsRequest, ListThreadsResponse, ListThreadsUseCase
from .list_user_threads import (
    ListUserThreadsRequest,
    ListUserThreadsResponse,
    ListUserThreadsUseCase,
)
from .reply_to_thread import (
    ReplyToThreadRequest,
    ReplyToThreadResponse,
    ReplyToThreadUseCase,
)

__all__ = [
    "AuthorSummary",
    "CommunitySummary",
    "CreateThreadRequest",
    "CreateThreadResponse",
    "CreateThreadUseCase",
    "DeleteThreadRequest",
    "DeleteThreadResponse",
    "DeleteThreadUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "ListThreadsRequest",
    "ListThreadsResponse",
    "ListThreadsUseCase",
    "ListUserThreadsRequest",
    "ListUserThreadsResponse",
    "ListUserThreadsUseCase",
    "ReplyToThreadRequest",
    "ReplyToThreadResponse",
    "ReplyToThreadUseCase",
    "ThreadCard",
    "ThreadCardBuilder",
    "ThreadTreeNode",
]
