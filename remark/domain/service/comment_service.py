"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from remark.domain.error import (
    ConcurrencyConflictError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
)
from remark.domain.model import (
    Comment,
    CommentAuthor,
    CommentCreatedEvent,
    CommentWithAuthor,
    User,
)
from remark.domain.repository import CommentRepository, UserRepository
from remark.domain.value import (
    CommentId,
    Permission,
    Principal,
    new_concurrency_stamp,
)

from .authorization_service import AuthorizationService
from .base import Service
from .event_publisher import EventPublisher
from .link_policy import ExternalLinkPolicy
from .thread_builder import CommentThread, build_comment_threads


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        link_policy: ExternalLinkPolicy,
        authorization_service: AuthorizationService,
        event_publisher: EventPublisher,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            user_repository: User repository, for author lookups
            link_policy: External link policy applied to comment text
            authorization_service: Capability checks for moderation
            event_publisher: Sink for comment created notifications
        """
        self.comment_repository = comment_repository
        self.user_repository = user_repository
        self.link_policy = link_policy
        self.authorization_service = authorization_service
        self.event_publisher = event_publisher

    async def list_threads(
        self, entity_type: str, entity_id: str
    ) -> list[CommentThread]:
        """Get all comments on an entity nested into threads.

        Public read, no principal required.

        Args:
            entity_type: Type of the commented entity
            entity_id: Identifier of the commented entity

        Returns:
            Top-level comments with their replies

        Raises:
            DataIntegrityError: If stored replies point at missing comments
        """
        with logfire.span(
            "comment_service.list_threads",
            entity_type=entity_type,
            entity_id=entity_id,
        ):
            comments = await self.comment_repository.find_with_authors(
                entity_type, entity_id
            )
            threads = build_comment_threads(comments)
            logfire.info(
                "Comment threads built",
                entity_type=entity_type,
                entity_id=entity_id,
                comment_count=len(comments),
                thread_count=len(threads),
            )
            return threads

    async def create_comment(
        self,
        entity_type: str,
        entity_id: str,
        text: str,
        principal: Principal | None,
        replied_comment_id: CommentId | None = None,
    ) -> CommentWithAuthor:
        """Create a comment on an entity or a reply to another comment.

        Args:
            entity_type: Type of the commented entity
            entity_id: Identifier of the commented entity
            text: Comment text
            principal: Current principal (None if unauthenticated)
            replied_comment_id: Comment being replied to (None for top-level)

        Returns:
            Created comment with its author

        Raises:
            NotAuthenticatedError: If there is no principal
            LinkNotAllowedError: If the text links to a disallowed site
            NotFoundError: If the replied comment does not exist
        """
        if principal is None:
            raise NotAuthenticatedError("create comments")

        with logfire.span(
            "comment_service.create_comment",
            entity_type=entity_type,
            entity_id=entity_id,
            author_id=str(principal.user_id),
            replied_comment_id=str(replied_comment_id) if replied_comment_id else None,
        ):
            self.link_policy.validate(entity_type, text)

            user = await self._author_for(principal)

            if replied_comment_id:
                replied_comment_id = await self._resolve_reply_target(
                    entity_type, entity_id, replied_comment_id
                )

            comment = Comment(
                id=CommentId(uuid4()),
                entity_type=entity_type,
                entity_id=entity_id,
                author_id=principal.user_id,
                text=text,
                replied_comment_id=replied_comment_id,
                concurrency_stamp=new_concurrency_stamp(),
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.insert(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                entity_type=entity_type,
                entity_id=entity_id,
                author_handle=user.handle.root,
                is_reply=saved.is_reply,
            )

            await self._publish_created(saved)

            return CommentWithAuthor(comment=saved, author=CommentAuthor.from_user(user))

    async def update_comment(
        self,
        comment_id: CommentId,
        text: str,
        principal: Principal | None,
        concurrency_stamp: str | None = None,
    ) -> Comment:
        """Update the text of a comment.

        Only the author may edit a comment; moderators have no override.

        Args:
            comment_id: Comment ID
            text: New text content
            principal: Current principal (None if unauthenticated)
            concurrency_stamp: Stamp the caller last saw, if any

        Returns:
            Updated comment with a new concurrency stamp

        Raises:
            NotAuthenticatedError: If there is no principal
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the principal is not the author
            LinkNotAllowedError: If the text links to a disallowed site
            ConcurrencyConflictError: If the stamp is stale
        """
        if principal is None:
            raise NotAuthenticatedError("edit comments")

        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            user_id=str(principal.user_id),
            text_length=len(text),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found for update", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if comment.author_id != principal.user_id:
                logfire.warn(
                    "Comment update by non-author rejected",
                    comment_id=str(comment_id),
                    author_id=str(comment.author_id),
                    user_id=str(principal.user_id),
                )
                raise NotAuthorizedError(
                    "edit", "comment", str(comment_id), str(principal.user_id)
                )

            self.link_policy.validate(comment.entity_type, text)

            if (
                concurrency_stamp is not None
                and concurrency_stamp != comment.concurrency_stamp
            ):
                logfire.warn(
                    "Stale concurrency stamp on comment update",
                    comment_id=str(comment_id),
                )
                raise ConcurrencyConflictError("Comment", str(comment_id))

            updated = await self.comment_repository.update(
                comment.with_text(text),
                expected_stamp=comment.concurrency_stamp,
            )
            logfire.info(
                "Comment text updated",
                comment_id=str(comment_id),
                entity_type=updated.entity_type,
                entity_id=updated.entity_id,
                text_length=len(updated.text),
            )
            return updated

    async def delete_comment(
        self, comment_id: CommentId, principal: Principal | None
    ) -> None:
        """Delete a comment and its replies.

        Allowed for the author, and for principals granted the
        delete-any-comment permission.

        Args:
            comment_id: Comment ID
            principal: Current principal (None if unauthenticated)

        Raises:
            NotAuthenticatedError: If there is no principal
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the principal may not delete the comment
        """
        if principal is None:
            raise NotAuthenticatedError("delete comments")

        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(principal.user_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found for delete", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if comment.author_id != principal.user_id and not (
                self.authorization_service.is_granted(
                    principal, Permission.DELETE_ANY_COMMENT
                )
            ):
                logfire.warn(
                    "Comment delete rejected",
                    comment_id=str(comment_id),
                    author_id=str(comment.author_id),
                    user_id=str(principal.user_id),
                )
                raise NotAuthorizedError(
                    "delete", "comment", str(comment_id), str(principal.user_id)
                )

            await self.comment_repository.delete_with_replies(comment)
            logfire.info(
                "Comment deleted with replies",
                comment_id=str(comment_id),
                by_moderator=comment.author_id != principal.user_id,
            )

    async def _author_for(self, principal: Principal) -> User:
        """Load the principal's user record, mirroring it on first use.

        Users live with the identity provider; the local row only backs
        author lookups and is created from the token's claims.
        """
        user = await self.user_repository.find_by_id(principal.user_id)
        if user:
            return user

        user = await self.user_repository.save(
            User(id=principal.user_id, handle=principal.handle)
        )
        logfire.info(
            "Comment author mirrored from token",
            user_id=str(principal.user_id),
            handle=principal.handle.root,
        )
        return user

    async def _resolve_reply_target(
        self, entity_type: str, entity_id: str, replied_comment_id: CommentId
    ) -> CommentId:
        """Return the top-level comment a new reply should attach to."""
        target = await self.comment_repository.find_by_id(replied_comment_id)
        if (
            not target
            or target.entity_type != entity_type
            or target.entity_id != entity_id
        ):
            logfire.warn(
                "Replied comment not found",
                replied_comment_id=str(replied_comment_id),
                entity_type=entity_type,
                entity_id=entity_id,
            )
            raise NotFoundError("Comment", str(replied_comment_id))

        # Replies to replies join the top-level comment's thread
        if target.replied_comment_id is not None:
            return target.replied_comment_id
        return target.id

    async def _publish_created(self, comment: Comment) -> None:
        """Publish a created notification, logging and discarding failures."""
        event = CommentCreatedEvent(
            comment_id=comment.id,
            entity_type=comment.entity_type,
            entity_id=comment.entity_id,
        )
        try:
            await self.event_publisher.publish(event)
        except Exception as e:
            logfire.error(
                "Failed to publish comment created event",
                comment_id=str(comment.id),
                error=str(e),
                error_type=type(e).__name__,
            )
