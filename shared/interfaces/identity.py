"""
Resolves who a request acts for: a signed-in user, a guest session, or both.
"""
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from rest_framework.exceptions import NotAuthenticated


@dataclass(frozen=True)
class RequestIdentity:
    user_id: Optional[str] = None
    session_id: Optional[str] = None


def get_request_identity(request, require: bool = True) -> RequestIdentity:
    """
    Read the user id from the authenticated user and the guest session id
    from the session header.
    """
    user = getattr(request, 'user', None)
    user_id = str(user.pk) if user is not None and user.is_authenticated else None
    session_id = request.headers.get(settings.SESSION_ID_HEADER) or None

    if require and not user_id and not session_id:
        raise NotAuthenticated("Sign in or provide a session id")
    return RequestIdentity(user_id=user_id, session_id=session_id)
