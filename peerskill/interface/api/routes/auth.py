"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from peerskill.application.usecase.auth import LoginUseCase, SignupUseCase
from peerskill.application.usecase.auth.login import LoginRequest, LoginResponse
from peerskill.application.usecase.auth.signup import SignupRequest

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)


@router.post("/signup", response_class=PlainTextResponse)
async def signup(
    request: SignupRequest,
    signup_use_case: FromDishka[SignupUseCase],
) -> PlainTextResponse:
    """Create an account.

    Example:
        POST /signup
        {
            "name": "Asha",
            "email": "asha@example.com",
            "password": "...",
            "teach": ["Python Basics"],
            "learn": ["Guitar"],
            "studyYear": "2",
            "branch": "CSE"
        }

        Response (text): Signup saved

    Raises:
        ConflictError: If the email is already registered (400)
    """
    await signup_use_case.execute(request)
    return PlainTextResponse("Signup saved")


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange email and password for a bearer token.

    Example:
        POST /login
        {"email": "Asha@Example.com", "password": "..."}

        Response:
        {
            "status": "ok",
            "role": "user",
            "name": "Asha",
            "email": "asha@example.com",
            "token": "eyJ..."
        }

    Raises:
        AuthError: If the credentials do not match (401)
    """
    return await login_use_case.execute(request)
