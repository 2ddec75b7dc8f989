"""Bearer token extraction."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Missing or non-bearer headers resolve to None; AccessService rejects them
bearer_scheme = HTTPBearer(auto_error=False)

BearerCredentials = Annotated[
    HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
]


def token_of(credentials: HTTPAuthorizationCredentials | None) -> str | None:
    """Raw token from an ``Authorization: Bearer`` header, if any."""
    return credentials.credentials if credentials else None
