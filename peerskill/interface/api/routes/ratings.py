"""Rating routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from peerskill.application.usecase.reputation import RatePeerUseCase
from peerskill.application.usecase.reputation.rate_peer import (
    RatePeerRequest,
    RatePeerResponse,
)
from peerskill.domain.service import AccessService
from peerskill.interface.api.security import BearerCredentials, token_of

router = APIRouter(tags=["ratings"], route_class=DishkaRoute)


@router.post("/rate-peer", response_model=RatePeerResponse)
async def rate_peer(
    request: RatePeerRequest,
    rate_peer_use_case: FromDishka[RatePeerUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> RatePeerResponse:
    """Rate another user from 1 to 5.

    Example:
        POST /rate-peer
        Authorization: Bearer ...
        {"peerEmail": "ravi@example.com", "rating": 5}

        Response:
        {"status": "ok", "newPoints": 30, "newRating": 4.3}
    """
    caller = access_service.authenticate(token_of(credentials))
    return await rate_peer_use_case.execute(request, caller)
