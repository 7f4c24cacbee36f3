"""Session resolution with a development fallback identity.

No real identity provider is wired in yet: ``get_server_session`` returns the
demo session, and ``get_current_user`` substitutes the demo identity whenever
no session can be resolved. Handlers only depend on ``get_current_user_id``,
so swapping in real authentication touches this module alone.
"""

import logging

from fastapi import Depends

from jobflow.core.config import settings
from jobflow.schemas import SessionUser, UserResponse
from jobflow.storage import Storage, get_storage

logger = logging.getLogger(__name__)


def demo_user() -> SessionUser:
    """The configured development identity."""
    return SessionUser(
        id=settings.demo_user_id,
        name=settings.demo_user_name,
        email=settings.demo_user_email,
    )


async def get_server_session() -> SessionUser | None:
    """Return the user of the current session, if any."""
    return demo_user()


async def resolve_session_user() -> SessionUser:
    """Resolve the acting user, falling back to the demo identity."""
    try:
        user = await get_server_session()
    except Exception as e:
        logger.warning(f"Session lookup failed, using demo user: {e}")
        return demo_user()
    return user or demo_user()


async def get_current_user(
    session_user: SessionUser = Depends(resolve_session_user),
    storage: Storage = Depends(get_storage),
) -> UserResponse:
    """Resolve the acting user, registering it on first sight.

    Profile fields (name, email, image) follow the session: a stored record
    that differs is brought up to date.
    """
    user = await storage.get_user(session_user.id)
    if user is None:
        return await storage.create_user(session_user)

    profile = session_user.model_dump(exclude={"id"})
    if user.model_dump(include=set(profile)) != profile:
        logger.info(f"Updating profile of user {session_user.id}")
        user = await storage.update_user(session_user) or user
    return user


async def get_current_user_id(
    user: UserResponse = Depends(get_current_user),
) -> str:
    return user.id
