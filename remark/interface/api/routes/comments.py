"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from remark.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from remark.domain.error import (
    ConcurrencyConflictError,
    LinkNotAllowedError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
)
from remark.domain.model.comment import (
    MAX_ENTITY_ID_LENGTH,
    MAX_ENTITY_TYPE_LENGTH,
    MAX_TEXT_LENGTH,
)
from remark.domain.service import JWTService

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    text: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)
    replied_comment_id: str | None = None  # Comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    text: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)
    concurrency_stamp: str | None = None


def _check_entity_ref(entity_type: str, entity_id: str) -> None:
    """Reject entity references the store cannot hold."""
    if len(entity_type) > MAX_ENTITY_TYPE_LENGTH or len(entity_id) > MAX_ENTITY_ID_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Entity type and id must be at most 64 characters",
        )


@router.get("/{entity_type}/{entity_id}", response_model=GetCommentsResponse)
async def get_comments(
    entity_type: str,
    entity_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get the comment threads of an entity.

    Public endpoint. Top-level comments are returned oldest first, each with
    its replies nested underneath.

    Args:
        entity_type: Type of the commented entity
        entity_id: Identifier of the commented entity
        get_comments_use_case: Get comments use case from DI

    Returns:
        Comment threads
    """
    _check_entity_ref(entity_type, entity_id)
    request = GetCommentsRequest(entity_type=entity_type, entity_id=entity_id)
    return await get_comments_use_case.execute(request)


@router.post(
    "/{entity_type}/{entity_id}",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    entity_type: str,
    entity_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Comment on an entity or reply to a comment.

    Requires authentication.

    Args:
        entity_type: Type of the commented entity
        entity_id: Identifier of the commented entity
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    _check_entity_ref(entity_type, entity_id)
    try:
        use_case_request = CreateCommentRequest(
            entity_type=entity_type,
            entity_id=entity_id,
            text=request.text,
            principal=jwt_service.get_principal_from_token(auth_token),
            replied_comment_id=request.replied_comment_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotAuthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except LinkNotAllowedError as e:
        logfire.warn("Comment creation rejected - link not allowed", url=e.url)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except NotFoundError as e:
        logfire.warn("Comment creation failed - not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.put("/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Update a comment's text content.

    Only the comment author can edit. Send the last seen concurrency stamp
    to detect concurrent edits.

    Args:
        comment_id: Comment UUID
        request: Update data (text and optional concurrency stamp)
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Updated comment with its new concurrency stamp

    Raises:
        HTTPException: If not authenticated, not authorized, stale or invalid
    """
    try:
        use_case_request = UpdateCommentRequest(
            comment_id=comment_id,
            text=request.text,
            principal=jwt_service.get_principal_from_token(auth_token),
            concurrency_stamp=request.concurrency_stamp,
        )
        return await update_comment_use_case.execute(use_case_request)
    except NotAuthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to edit this comment",
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ConcurrencyConflictError as e:
        logfire.warn("Comment update conflict", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except LinkNotAllowedError as e:
        logfire.warn("Comment update rejected - link not allowed", url=e.url)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except ValueError as e:
        logfire.warn("Comment update validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete a comment and its replies.

    Allowed for the author and for moderators holding the delete-any
    permission.

    Args:
        comment_id: Comment UUID
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Raises:
        HTTPException: If not authenticated, not authorized or not found
    """
    try:
        use_case_request = DeleteCommentRequest(
            comment_id=comment_id,
            principal=jwt_service.get_principal_from_token(auth_token),
        )
        await delete_comment_use_case.execute(use_case_request)
    except NotAuthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
