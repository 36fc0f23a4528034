"""
Authentication endpoint for API v1.

``POST /auth/login`` checks an e-mail and password pair and returns the
matching user together with a bearer token.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from personal_finance_api.app.api.deps import get_auth_service
from personal_finance_api.app.core.security import create_access_token
from personal_finance_api.app.schemas.user import LoginRequest, LoginResponse
from personal_finance_api.app.services.interfaces import AuthServiceInterface


router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    auth: AuthServiceInterface = Depends(get_auth_service),
) -> LoginResponse:
    user = await auth.check_credential(credentials.email, credentials.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token = create_access_token({"sub": user.id})
    return LoginResponse(user=user, access_token=token)
