"""Refresh token transport format: ``<sessionId>.<secretPart>``."""

from dataclasses import dataclass, field

from ....core.exceptions.auth import MalformedTokenError

REFRESH_TOKEN_SEPARATOR = "."


@dataclass(frozen=True)
class RefreshTokenParts:
    """A refresh token split into its public and secret halves."""
    
    session_id: str
    secret: str = field(repr=False)


@dataclass(frozen=True)
class IssuedRefreshSecret:
    """Freshly generated refresh secret and its keyed hash.

    The raw secret exists only until it is handed to the client.
    """
    
    secret: str = field(repr=False)
    hash: str


def compose_refresh_token(session_id: str, secret: str) -> str:
    return f"{session_id}{REFRESH_TOKEN_SEPARATOR}{secret}"


def parse_refresh_token(token: str) -> RefreshTokenParts:
    """Split a refresh token on the first separator.

    Raises:
        MalformedTokenError: if the separator is missing or either half is empty
    """
    session_id, separator, secret = (token or "").partition(REFRESH_TOKEN_SEPARATOR)
    if not separator or not session_id or not secret:
        raise MalformedTokenError("Invalid refresh token format")
    return RefreshTokenParts(session_id=session_id, secret=secret)


def extract_session_id(token: str) -> str:
    """Return the session id prefix of a refresh token (used on logout).

    A token without a separator is taken whole as the session id.

    Raises:
        MalformedTokenError: if no session id can be extracted (400 on logout)
    """
    session_id = (token or "").partition(REFRESH_TOKEN_SEPARATOR)[0].strip()
    if not session_id:
        raise MalformedTokenError("Invalid refresh token format", status_code=400)
    return session_id
