"""
Credential checking.

Passwords are compared against the salted PBKDF2 hash kept on the user
document.  An unknown email and a wrong password produce the same
result so callers cannot tell which one failed.
"""

import logging
from typing import Optional

from personal_finance_api.app.core.security import verify_password
from personal_finance_api.app.schemas.user import UserRead
from personal_finance_api.app.services.interfaces import AuthServiceInterface
from personal_finance_api.app.services.user_service import UsersService


logger = logging.getLogger(__name__)


class AuthService(AuthServiceInterface):

    def __init__(self, users: UsersService) -> None:
        self.users = users

    async def check_credential(self, email: str, password: str) -> Optional[UserRead]:
        found = await self.users.get_credentials(email)
        if found is None:
            logger.info("Login failed for %s", email)
            return None
        user, password_hash = found
        if not verify_password(password, password_hash):
            logger.info("Login failed for %s", email)
            return None
        logger.info("User %s logged in", user.id)
        return user
