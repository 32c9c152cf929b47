# blog_api/dependencies/dependencies.py

"""Application dependencies: sessions, repositories, services and the access guard."""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.configs import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE, MAX_PAGE_SIZE
from blog_api.db import get_session
from blog_api.errors import IdentityNotFoundError, UnauthenticatedError, UserAuthenticationError
from blog_api.managers.token_manager import decode_access_token
from blog_api.models import UserDB
from blog_api.monitoring import bind_user_id
from blog_api.repositories import PostRepository, UserRepository
from blog_api.schemas.post import PostOrdering
from blog_api.services import AuthService, PostService

# Missing or non-Bearer Authorization headers resolve to None instead of raising
bearer_scheme = HTTPBearer(auto_error=False)

SessionDep = Annotated[AsyncSession, Depends(get_session)]
BearerDep = Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)]


def get_user_repository(session: SessionDep) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


def get_post_repository(session: SessionDep) -> PostRepository:
    """
    Resolve the `PostRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    PostRepository
        Repository instance bound to the session.
    """
    return PostRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
PostRepoDep = Annotated[PostRepository, Depends(get_post_repository)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    return AuthService(user_repo)


def get_post_service(post_repo: PostRepoDep, user_repo: UserRepoDep) -> PostService:
    return PostService(post_repo, user_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
PostServiceDep = Annotated[PostService, Depends(get_post_service)]


async def get_current_user(credentials: BearerDep, user_repo: UserRepoDep) -> UserDB:
    """
    Resolve the caller from a mandatory bearer token.

    Parameters
    ----------
    credentials : HTTPAuthorizationCredentials | None
        Parsed ``Authorization: Bearer <token>`` header, if any.
    user_repo : UserRepository
        User repository.

    Returns
    -------
    UserDB
        Current authenticated user.

    Raises
    ------
    UnauthenticatedError
        If no bearer token was sent.
    InvalidTokenError
        If the token is malformed, tampered with, or expired.
    IdentityNotFoundError
        If the token's user no longer exists.
    """
    if credentials is None:
        raise UnauthenticatedError

    token_data = decode_access_token(credentials.credentials)
    user = await user_repo.get_by_id(token_data.user_id)
    if user is None:
        raise IdentityNotFoundError

    bind_user_id(str(user.id))
    return user


async def get_optional_user(credentials: BearerDep, user_repo: UserRepoDep) -> UserDB | None:
    """
    Resolve the caller if a usable bearer token was sent.

    Any failure, from a missing header to a deleted account, yields an
    anonymous caller instead of an error.

    Parameters
    ----------
    credentials : HTTPAuthorizationCredentials | None
        Parsed ``Authorization: Bearer <token>`` header, if any.
    user_repo : UserRepository
        User repository.

    Returns
    -------
    UserDB | None
        Current user, or None for anonymous callers.
    """
    try:
        return await get_current_user(credentials, user_repo)
    except UserAuthenticationError:
        return None


CurrentUserDep = Annotated[UserDB, Depends(get_current_user)]
OptionalUserDep = Annotated[UserDB | None, Depends(get_optional_user)]


@dataclass(frozen=True)
class PostListQuery:
    """
    Query container for public post listing.

    Parameters
    ----------
    search : str | None
        Case-insensitive term for title, description, tags or author name.
    author : UUID | None
        Owner ID filter.
    tag : str | None
        Exact tag filter.
    ordering : PostOrdering
        Resolved sort order.
    page : int
        1-based page number.
    limit : int
        Page size.
    """

    search: str | None = None
    author: UUID | None = None
    tag: str | None = None
    ordering: PostOrdering = PostOrdering.TIMESTAMP
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_SIZE


def get_post_list_query(
    search: Annotated[str | None, Query(description="Search term")] = None,
    author: Annotated[UUID | None, Query(description="Author ID")] = None,
    tag: Annotated[str | None, Query(description="Exact tag")] = None,
    order_by: Annotated[
        str | None,
        Query(
            alias="orderBy",
            description="read_count (desc), reading_time (asc) or timestamp (desc, default)",
        ),
    ] = None,
    page: Annotated[
        int,
        Query(ge=1, le=MAX_PAGE, description="1-based page number"),
    ] = DEFAULT_PAGE,
    limit: Annotated[
        int,
        Query(ge=1, le=MAX_PAGE_SIZE, description="Page size"),
    ] = DEFAULT_PAGE_SIZE,
) -> PostListQuery:
    return PostListQuery(
        search=search,
        author=author,
        tag=tag,
        ordering=PostOrdering.from_param(order_by),
        page=page,
        limit=limit,
    )


PostListQueryDep = Annotated[PostListQuery, Depends(get_post_list_query)]


@dataclass(frozen=True)
class OwnerPostQuery:
    state: str | None = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_SIZE


def get_owner_post_query(
    state: Annotated[
        str | None,
        Query(description="draft or published; other values are ignored"),
    ] = None,
    page: Annotated[
        int,
        Query(ge=1, le=MAX_PAGE, description="1-based page number"),
    ] = DEFAULT_PAGE,
    limit: Annotated[
        int,
        Query(ge=1, le=MAX_PAGE_SIZE, description="Page size"),
    ] = DEFAULT_PAGE_SIZE,
) -> OwnerPostQuery:
    return OwnerPostQuery(state=state, page=page, limit=limit)


OwnerPostQueryDep = Annotated[OwnerPostQuery, Depends(get_owner_post_query)]
