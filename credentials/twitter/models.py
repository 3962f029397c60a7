# credentials/twitter/models.py
"""
Data models for the Twitter credential plugin.

HandshakeState mirrors the OAuth 1.0a values kept in the host session;
IdentityRecord is what a successful identity check produces.
"""

from typing import Any, Dict, Mapping, MutableMapping

from pydantic import BaseModel, ConfigDict

REQUEST_TOKEN = "request_token"
REQUEST_TOKEN_SECRET = "request_token_secret"
ACCESS_TOKEN = "access_token"
ACCESS_TOKEN_SECRET = "access_token_secret"


class HandshakeState(BaseModel):
    """Snapshot of one login attempt's OAuth values held in the session."""

    request_token: str = ""
    request_token_secret: str = ""
    access_token: str = ""
    access_token_secret: str = ""

    @classmethod
    def from_session(cls, session: Mapping[str, Any]) -> "HandshakeState":
        return cls(
            request_token=session.get(REQUEST_TOKEN) or "",
            request_token_secret=session.get(REQUEST_TOKEN_SECRET) or "",
            access_token=session.get(ACCESS_TOKEN) or "",
            access_token_secret=session.get(ACCESS_TOKEN_SECRET) or "",
        )

    @property
    def has_request_token(self) -> bool:
        return bool(self.request_token and self.request_token_secret)

    @property
    def has_access_token(self) -> bool:
        return bool(self.access_token and self.access_token_secret)


def store_request_token(session: MutableMapping[str, Any], token: str, secret: str) -> None:
    """Start a new handshake in the session, dropping any completed one."""
    session[REQUEST_TOKEN] = token
    session[REQUEST_TOKEN_SECRET] = secret
    session[ACCESS_TOKEN] = ""
    session[ACCESS_TOKEN_SECRET] = ""


def store_access_token(session: MutableMapping[str, Any], token: str, secret: str) -> None:
    session[ACCESS_TOKEN] = token
    session[ACCESS_TOKEN_SECRET] = secret


class IdentityRecord(BaseModel):
    """
    Twitter user identity plus the access credentials obtained for that user.
    """

    provider_user_id: str
    screen_name: str = ""
    access_token: str
    access_token_secret: str
    name: str = ""
    profile_image_url: str = ""

    model_config = ConfigDict(frozen=True)

    def lookup_key(self) -> Dict[str, str]:
        """Key handed to the realm's user finder."""
        return {"provider_user_id": self.provider_user_id}

    def to_user_info(self) -> Dict[str, str]:
        """Linked-identity fields in the layout host user tables use."""
        return {
            "twitter_user": self.screen_name,
            "twitter_user_id": self.provider_user_id,
            "twitter_access_token": self.access_token,
            "twitter_access_token_secret": self.access_token_secret,
        }
