"""Domain layer DI providers."""

from dishka import Scope, provide

from remark.config import AuthSettings, CommentSettings
from remark.domain.repository import CommentRepository, UserRepository
from remark.domain.service import (
    AuthorizationService,
    CommentService,
    EventPublisher,
    ExternalLinkPolicy,
    JWTService,
)
from remark.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Stateless policies built from settings are APP-scoped.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_link_policy(self, comment_settings: CommentSettings) -> ExternalLinkPolicy:
        """Provide external link policy from configured allow-lists."""
        return ExternalLinkPolicy(
            allowed_external_urls=comment_settings.allowed_external_urls
        )

    @provide(scope=Scope.APP)
    def get_authorization_service(self) -> AuthorizationService:
        """Provide authorization domain service."""
        return AuthorizationService()

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        link_policy: ExternalLinkPolicy,
        authorization_service: AuthorizationService,
        event_publisher: EventPublisher,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            user_repository=user_repository,
            link_policy=link_policy,
            authorization_service=authorization_service,
            event_publisher=event_publisher,
        )
