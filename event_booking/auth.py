# auth.py
import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt

from event_booking.config import JWT_ALGORITHM, JWT_SECRET
from event_booking.database import database
from event_booking.repositories import SessionRepository, SessionRepositoryProtocol

logger = logging.getLogger(__name__)

# Raises 401 on its own when the Authorization header is missing
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="sign-in")


def get_session_repository() -> SessionRepositoryProtocol:
    return SessionRepository(database)


def create_access_token(user_id: int) -> str:
    return jwt.encode({"userId": user_id}, JWT_SECRET, algorithm=JWT_ALGORITHM)


async def get_current_user_id(
    token: str = Depends(oauth2_scheme),
    session_repository: SessionRepositoryProtocol = Depends(get_session_repository),
) -> int:
    """Resolves the bearer token to a user id; the token must belong to a live session."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
        user_id = payload.get("userId")
        if user_id is None:
            raise credentials_exception
        user_id = int(user_id)
    except (JWTError, TypeError, ValueError):
        logger.warning("Rejected malformed or badly signed token")
        raise credentials_exception

    session = await session_repository.find_by_token(token)
    if session is None:
        logger.warning("Rejected token for user %s with no session", user_id)
        raise credentials_exception

    return user_id
