"""Application use case providers."""

from dishka import Scope, provide

from remark.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from remark.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Comment use cases, built per request from their annotated constructors."""

    scope = Scope.REQUEST

    get_comments = provide(GetCommentsUseCase)
    create_comment = provide(CreateCommentUseCase)
    update_comment = provide(UpdateCommentUseCase)
    delete_comment = provide(DeleteCommentUseCase)
