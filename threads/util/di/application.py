"""Application layer DI providers."""

from dishka import Scope, provide

from threads.application.usecase.auth import GetCurrentUserUseCase
from threads.application.usecase.community import (
    AddMemberUseCase,
    CreateCommunityUseCase,
    DeleteCommunityUseCase,
    GetCommunityUseCase,
    ListCommunityThreadsUseCase,
    RemoveMemberUseCase,
    SearchCommunitiesUseCase,
    UpdateCommunityUseCase,
)
from threads.application.usecase.thread import (
    CreateThreadUseCase,
    DeleteThreadUseCase,
    GetThreadUseCase,
    ListThreadsUseCase,
    ListUserThreadsUseCase,
    ReplyToThreadUseCase,
    ThreadCardBuilder,
)
from threads.application.usecase.user import (
    GetActivityUseCase,
    GetUserUseCase,
    SearchUsersUseCase,
    UpdateUserUseCase,
)
from threads.config import ThreadSettings
from threads.domain.service import (
    CommunityService,
    JWTService,
    ThreadService,
    UserService,
)
from threads.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_thread_card_builder(
        self,
        thread_service: ThreadService,
        user_service: UserService,
        community_service: CommunityService,
    ) -> ThreadCardBuilder:
        """Provide thread card builder."""
        return ThreadCardBuilder(
            thread_service=thread_service,
            user_service=user_service,
            community_service=community_service,
        )

    # Auth use cases
    @provide
    def get_current_user_use_case(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        community_service: CommunityService,
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service,
            user_service=user_service,
            community_service=community_service,
        )

    # Thread use cases
    @provide
    def get_create_thread_use_case(
        self,
        thread_service: ThreadService,
        user_service: UserService,
        community_service: CommunityService,
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(
            thread_service=thread_service,
            user_service=user_service,
            community_service=community_service,
        )

    @provide
    def get_list_threads_use_case(
        self, thread_service: ThreadService, card_builder: ThreadCardBuilder
    ) -> ListThreadsUseCase:
        """Provide list threads use case."""
        return ListThreadsUseCase(
            thread_service=thread_service, card_builder=card_builder
        )

    @provide
    def get_get_thread_use_case(
        self,
        thread_service: ThreadService,
        user_service: UserService,
        community_service: CommunityService,
        thread_settings: ThreadSettings,
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            thread_service=thread_service,
            user_service=user_service,
            community_service=community_service,
            thread_settings=thread_settings,
        )

    @provide
    def get_reply_to_thread_use_case(
        self, thread_service: ThreadService, user_service: UserService
    ) -> ReplyToThreadUseCase:
        """Provide reply to thread use case."""
        return ReplyToThreadUseCase(
            thread_service=thread_service, user_service=user_service
        )

    @provide
    def get_delete_thread_use_case(
        self, thread_service: ThreadService
    ) -> DeleteThreadUseCase:
        """Provide delete thread use case."""
        return DeleteThreadUseCase(thread_service=thread_service)

    @provide
    def get_list_user_threads_use_case(
        self,
        user_service: UserService,
        thread_service: ThreadService,
        card_builder: ThreadCardBuilder,
    ) -> ListUserThreadsUseCase:
        """Provide list user threads use case."""
        return ListUserThreadsUseCase(
            user_service=user_service,
            thread_service=thread_service,
            card_builder=card_builder,
        )

    # User use cases
    @provide
    def get_get_user_use_case(
        self, user_service: UserService, community_service: CommunityService
    ) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(
            user_service=user_service, community_service=community_service
        )

    @provide
    def get_update_user_use_case(
        self, user_service: UserService, community_service: CommunityService
    ) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(
            user_service=user_service, community_service=community_service
        )

    @provide
    def get_search_users_use_case(
        self, user_service: UserService
    ) -> SearchUsersUseCase:
        """Provide search users use case."""
        return SearchUsersUseCase(user_service=user_service)

    @provide
    def get_get_activity_use_case(
        self, thread_service: ThreadService, user_service: UserService
    ) -> GetActivityUseCase:
        """Provide get activity use case."""
        return GetActivityUseCase(
            thread_service=thread_service, user_service=user_service
        )

    # Community use cases
    @provide
    def get_create_community_use_case(
        self, community_service: CommunityService, user_service: UserService
    ) -> CreateCommunityUseCase:
        """Provide create community use case."""
        return CreateCommunityUseCase(
            community_service=community_service, user_service=user_service
        )

    @provide
    def get_get_community_use_case(
        self, community_service: CommunityService, user_service: UserService
    ) -> GetCommunityUseCase:
        """Provide get community use case."""
        return GetCommunityUseCase(
            community_service=community_service, user_service=user_service
        )

    @provide
    def get_list_community_threads_use_case(
        self,
        community_service: CommunityService,
        thread_service: ThreadService,
        card_builder: ThreadCardBuilder,
    ) -> ListCommunityThreadsUseCase:
        """Provide list community threads use case."""
        return ListCommunityThreadsUseCase(
            community_service=community_service,
            thread_service=thread_service,
            card_builder=card_builder,
        )

    @provide
    def get_search_communities_use_case(
        self, community_service: CommunityService
    ) -> SearchCommunitiesUseCase:
        """Provide search communities use case."""
        return SearchCommunitiesUseCase(community_service=community_service)

    @provide
    def get_add_member_use_case(
        self, community_service: CommunityService, user_service: UserService
    ) -> AddMemberUseCase:
        """Provide add member use case."""
        return AddMemberUseCase(
            community_service=community_service, user_service=user_service
        )

    @provide
    def get_remove_member_use_case(
        self, community_service: CommunityService, user_service: UserService
    ) -> RemoveMemberUseCase:
        """Provide remove member use case."""
        return RemoveMemberUseCase(
            community_service=community_service, user_service=user_service
        )

    @provide
    def get_update_community_use_case(
        self, community_service: CommunityService, user_service: UserService
    ) -> UpdateCommunityUseCase:
        """Provide update community use case."""
        return UpdateCommunityUseCase(
            community_service=community_service, user_service=user_service
        )

    @provide
    def get_delete_community_use_case(
        self, community_service: CommunityService, thread_service: ThreadService
    ) -> DeleteCommunityUseCase:
        """Provide delete community use case."""
        return DeleteCommunityUseCase(
            community_service=community_service, thread_service=thread_service
        )
