"""
Blog post routes.

Summary
-------
Public listing and reading of published posts, plus authenticated
creation, update, deletion and the owner's own listing.

Notes
-----
Drafts are only ever visible through ``GET /api/blogs/me``. Reading a
single post increments its read count even when the post turns out not to
be visible.
"""

from uuid import UUID

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED

from blog_api.dependencies import (
    CurrentUserDep,
    OptionalUserDep,
    OwnerPostQueryDep,
    PostListQueryDep,
    PostServiceDep,
)
from blog_api.managers import limiter
from blog_api.models import PostDB, UserDB
from blog_api.schemas.post import (
    AuthorResponse,
    PostCreate,
    PostDetailResponse,
    PostResponse,
    PostUpdate,
    PostWithAuthorResponse,
)
from blog_api.schemas.response import ErrorResponse, ListResponse, SuccessResponse
from blog_api.utils.helpers import format_reading_time

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

POST_EXAMPLE = {
    "id": "550e8400-e29b-41d4-a716-446655440000",
    "title": "Notes on the Analytical Engine",
    "description": "A short introduction",
    "body": "The Analytical Engine weaves algebraic patterns...",
    "tags": ["history", "computing"],
    "state": "published",
    "read_count": 12,
    "reading_time": "1 min read",
    "timestamp": "2026-01-01T00:00:00Z",
    "updated_at": None,
}
AUTHOR_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": "ada@example.com",
}
NOT_FOUND_RESPONSE = {
    "model": ErrorResponse,
    "description": "Post does not exist or is not published",
    "content": {"application/json": {"example": {"status": "fail", "message": "Blog not found"}}},
}
UNAUTHORIZED_RESPONSE = {
    "model": ErrorResponse,
    "description": "Missing, invalid or expired token",
    "content": {
        "application/json": {"example": {"status": "fail", "message": "Not authorized, no token"}},
    },
}


def db_post_to_response(post: PostDB) -> PostResponse:
    """Build the owner-facing view of a post."""
    return PostResponse(
        id=post.id,
        title=post.title,
        description=post.description,
        body=post.body,
        tags=post.tags,
        state=post.state,
        read_count=post.read_count,
        reading_time=format_reading_time(post.reading_time_minutes),
        timestamp=post.timestamp,
        updated_at=post.updated_at,
        author=post.author_id,
    )


def db_post_with_author_to_response(post: PostDB, author: UserDB) -> PostWithAuthorResponse:
    """Build the public view of a post with its author inlined."""
    return PostWithAuthorResponse(
        **db_post_to_response(post).model_dump(exclude={"author"}),
        author=AuthorResponse.model_validate(author),
    )


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=ListResponse[PostWithAuthorResponse],
    summary="List published posts",
    description=(
        "Paginated list of published posts. Filter with `search`, `author` and `tag`; "
        "sort with `orderBy` (read_count, reading_time, timestamp)."
    ),
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "success",
                        "data": [{**POST_EXAMPLE, "author": AUTHOR_EXAMPLE}],
                        "page": 1,
                        "limit": 20,
                        "total": 1,
                    },
                },
            },
        },
    },
    operation_id="list_published_posts",
)
async def list_posts(
    query: PostListQueryDep,
    post_service: PostServiceDep,
) -> ListResponse[PostWithAuthorResponse]:
    """
    List published posts.

    Parameters
    ----------
    query : PostListQuery
        Filters, ordering and pagination.
    post_service : PostService
        Post service dependency.

    Returns
    -------
    ListResponse[PostWithAuthorResponse]
        One page of published posts with authors inlined.
    """
    rows, total = await post_service.list_published(
        search=query.search,
        author_id=query.author,
        tag=query.tag,
        ordering=query.ordering,
        page=query.page,
        limit=query.limit,
    )
    return ListResponse(
        data=[db_post_with_author_to_response(post, author) for post, author in rows],
        page=query.page,
        limit=query.limit,
        total=total,
    )


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=SuccessResponse[PostResponse],
    status_code=HTTP_201_CREATED,
    summary="Create a post",
    description="Create a post owned by the caller. `state` defaults to `draft`.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "success",
                        "data": {
                            **POST_EXAMPLE,
                            "state": "draft",
                            "read_count": 0,
                            "author": AUTHOR_EXAMPLE["id"],
                        },
                    },
                },
            },
        },
        400: {
            "description": "Invalid input or duplicate title",
            "content": {
                "application/json": {
                    "example": {
                        "status": "fail",
                        "message": (
                            'Duplicate field value: "Notes on the Analytical Engine". '
                            "Please use another value!"
                        ),
                    },
                },
            },
        },
        401: UNAUTHORIZED_RESPONSE,
    },
    operation_id="create_post",
)
@limiter.limit("30/minute")
async def create_post(
    request: Request,
    response: Response,
    post_create: PostCreate,
    current_user: CurrentUserDep,
    post_service: PostServiceDep,
) -> SuccessResponse[PostResponse]:
    """
    Create a post.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    post_create : PostCreate
        Post data.
    current_user : UserDB
        Authenticated caller, who becomes the owner.
    post_service : PostService
        Post service dependency.

    Returns
    -------
    SuccessResponse[PostResponse]
        Created post.

    Raises
    ------
    DuplicateEntryError
        If the title is already taken.
    """
    post = await post_service.create_post(post_create, current_user)
    return SuccessResponse(data=db_post_to_response(post))


@router.get(
    "/me",
    response_class=ORJSONResponse,
    response_model=ListResponse[PostResponse],
    summary="List my posts",
    description="The caller's own posts, drafts included, newest first. Filter with `state`.",
    responses={401: UNAUTHORIZED_RESPONSE},
    operation_id="list_my_posts",
)
async def list_my_posts(
    query: OwnerPostQueryDep,
    current_user: CurrentUserDep,
    post_service: PostServiceDep,
) -> ListResponse[PostResponse]:
    """
    List the caller's posts.

    Parameters
    ----------
    query : OwnerPostQuery
        State filter and pagination.
    current_user : UserDB
        Authenticated caller.
    post_service : PostService
        Post service dependency.

    Returns
    -------
    ListResponse[PostResponse]
        One page of the caller's posts.
    """
    posts, total = await post_service.list_owned(
        current_user,
        state=query.state,
        page=query.page,
        limit=query.limit,
    )
    return ListResponse(
        data=[db_post_to_response(post) for post in posts],
        page=query.page,
        limit=query.limit,
        total=total,
    )


@router.get(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=PostDetailResponse,
    summary="Read a post",
    description="Read a published post. Every call increments its read count.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "success",
                        "data": {**POST_EXAMPLE, "author": AUTHOR_EXAMPLE},
                        "read_count": 12,
                    },
                },
            },
        },
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="get_post",
)
async def get_post(
    post_id: UUID,
    current_user: OptionalUserDep,
    post_service: PostServiceDep,
) -> PostDetailResponse:
    """
    Read a single published post.

    Parameters
    ----------
    post_id : UUID
        Post ID.
    current_user : UserDB | None
        Caller, if a valid token was sent. Drafts stay hidden either way.
    post_service : PostService
        Post service dependency.

    Returns
    -------
    PostDetailResponse
        The post with its author and updated read count.

    Raises
    ------
    PostNotFoundError
        If the post does not exist or is not published.
    """
    post, author = await post_service.get_published_post(post_id)
    return PostDetailResponse(
        data=db_post_with_author_to_response(post, author),
        read_count=post.read_count,
    )


@router.patch(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=SuccessResponse[PostResponse],
    summary="Update a post",
    description="Partially update a post owned by the caller. Absent fields are untouched.",
    responses={
        401: UNAUTHORIZED_RESPONSE,
        403: {
            "description": "Caller is not the owner",
            "content": {
                "application/json": {
                    "example": {
                        "status": "fail",
                        "message": "You are not authorized to update this blog",
                    },
                },
            },
        },
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="update_post",
)
async def update_post(
    post_id: UUID,
    post_update: PostUpdate,
    current_user: CurrentUserDep,
    post_service: PostServiceDep,
) -> SuccessResponse[PostResponse]:
    """
    Update a post.

    Parameters
    ----------
    post_id : UUID
        Post ID.
    post_update : PostUpdate
        Fields to replace.
    current_user : UserDB
        Authenticated caller.
    post_service : PostService
        Post service dependency.

    Returns
    -------
    SuccessResponse[PostResponse]
        Updated post.

    Raises
    ------
    PostNotFoundError
        If the post does not exist.
    PostOwnershipError
        If the caller is not the owner.
    """
    post = await post_service.update_post(post_id, post_update, current_user)
    return SuccessResponse(data=db_post_to_response(post))


@router.delete(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=SuccessResponse[None],
    summary="Delete a post",
    description="Delete a post owned by the caller.",
    responses={
        200: {"content": {"application/json": {"example": {"status": "success", "data": None}}}},
        401: UNAUTHORIZED_RESPONSE,
        403: {
            "description": "Caller is not the owner",
            "content": {
                "application/json": {
                    "example": {
                        "status": "fail",
                        "message": "You are not authorized to delete this blog",
                    },
                },
            },
        },
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="delete_post",
)
async def delete_post(
    post_id: UUID,
    current_user: CurrentUserDep,
    post_service: PostServiceDep,
) -> SuccessResponse[None]:
    """
    Delete a post.

    Parameters
    ----------
    post_id : UUID
        Post ID.
    current_user : UserDB
        Authenticated caller.
    post_service : PostService
        Post service dependency.

    Returns
    -------
    SuccessResponse[None]
        Envelope with ``data: null``.

    Raises
    ------
    PostNotFoundError
        If the post does not exist.
    PostOwnershipError
        If the caller is not the owner.
    """
    await post_service.delete_post(post_id, current_user)
    return SuccessResponse(data=None)
