"""Authentication routes for user signup and login."""

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED

from blog_api.dependencies import AuthServiceDep
from blog_api.managers import limiter
from blog_api.schemas.auth import LoginRequest, Token
from blog_api.schemas.response import SuccessResponse
from blog_api.schemas.user import SignupData, UserCreate, UserResponse

router = APIRouter(prefix="/api/auth", tags=["🔐 Auth"])


@router.post(
    "/signup",
    response_class=ORJSONResponse,
    response_model=SuccessResponse[SignupData],
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    description="Create an account. The password is stored only as a one-way hash.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "success",
                        "data": {
                            "user": {
                                "id": "123e4567-e89b-12d3-a456-426614174000",
                                "first_name": "Ada",
                                "last_name": "Lovelace",
                                "email": "ada@example.com",
                                "created_at": "2026-01-01T00:00:00Z",
                            },
                        },
                    },
                },
            },
        },
        400: {
            "description": "Invalid input or email already registered",
            "content": {
                "application/json": {
                    "example": {
                        "status": "fail",
                        "message": (
                            'Duplicate field value: "ada@example.com". '
                            "Please use another value!"
                        ),
                    },
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {
                "application/json": {
                    "example": {
                        "status": "fail",
                        "message": "Too many requests, please try again later.",
                    },
                },
            },
        },
    },
    operation_id="auth_signup",
)
@limiter.limit("10/hour")
async def signup(
    request: Request,
    response: Response,
    user_create: UserCreate,
    auth_service: AuthServiceDep,
) -> SuccessResponse[SignupData]:
    """
    Register a new user.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    user_create : UserCreate
        Signup data.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    SuccessResponse[SignupData]
        Created user, without password material.

    Raises
    ------
    DuplicateEntryError
        If the email is already registered.
    """
    user = await auth_service.register_user(user_create)
    return SuccessResponse(data=SignupData(user=UserResponse.model_validate(user)))


@router.post(
    "/login",
    response_class=ORJSONResponse,
    response_model=SuccessResponse[Token],
    summary="Login for access token",
    description="Exchange email and password for a bearer token valid for one hour.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "success",
                        "data": {
                            "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                            "token_type": "bearer",
                            "expires_in": 3600,
                        },
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {
                    "example": {"status": "fail", "message": "Invalid email or password"},
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {
                "application/json": {
                    "example": {
                        "status": "fail",
                        "message": "Too many requests, please try again later.",
                    },
                },
            },
        },
    },
    operation_id="auth_login",
)
@limiter.limit("5/minute")
async def login(
    request: Request,
    response: Response,
    credentials: LoginRequest,
    auth_service: AuthServiceDep,
) -> SuccessResponse[Token]:
    """
    Login with email and password.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    credentials : LoginRequest
        Email and password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    SuccessResponse[Token]
        Access token envelope.

    Raises
    ------
    InvalidCredentialsError
        If authentication fails.
    """
    user = await auth_service.authenticate_user(
        str(credentials.email),
        credentials.password.get_secret_value(),
    )
    return SuccessResponse(data=auth_service.create_token_for_user(user))
