# credentials/twitter/credential.py
"""
Twitter Credential Plugin
=========================

This module implements Twitter OAuth 1.0a login for a host framework realm.
It runs the three-legged handshake against the host's session mapping and
hands a verified IdentityRecord to the realm's user finder.

The TwitterCredential class provides methods for:
- Starting the handshake and building the authorization URL
- Redeeming the verifier and verifying the user's identity
- Looking up the application user and syncing its linked Twitter fields

Session keys used: request_token, request_token_secret, access_token,
access_token_secret. Once an access token pair is in the session, later calls
reuse it instead of redeeming the verifier again.
"""

import logging
from typing import Any, Dict, Mapping, MutableMapping, Optional

from credentials import CredentialPlugin
from credentials.exceptions import HandshakeError, ProviderError
from credentials.realm import IdentityLinkable, UserFinder
from credentials.twitter.client import TwitterOAuthClient
from credentials.twitter.config import CredentialConfig, get_twitter_settings
from credentials.twitter.models import (
    HandshakeState,
    IdentityRecord,
    store_access_token,
    store_request_token,
)

logger = logging.getLogger(__name__)


class TwitterCredential(CredentialPlugin):
    """
    Credential plugin for Sign in with Twitter.

    One instance handles one login attempt. The last verified identity is
    kept in ``twitter_user`` so callers can, for example, create a user on
    the fly when ``authenticate`` finds none.

    Args:
        config (Mapping[str, Any]): Credential configuration
        app_config (Mapping[str, Any]): Application-wide configuration using the
            ``twitter_*`` keys; read from the environment when omitted
        realm_config (Mapping[str, Any]): Realm configuration, wins over ``config``

    Raises:
        ConfigError: If consumer_key, consumer_secret or callback_url is not defined
    """

    service_name = "twitter"

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        app_config: Optional[Mapping[str, Any]] = None,
        realm_config: Optional[Mapping[str, Any]] = None,
    ):
        if app_config is None:
            app_config = get_twitter_settings().as_app_config()

        self.settings = CredentialConfig.resolve(config, app_config, realm_config)
        self.twitter_user: Optional[IdentityRecord] = None
        self._twitter = self.get_client()

    @property
    def consumer_key(self) -> str:
        return self.settings.consumer_key

    @property
    def consumer_secret(self) -> str:
        return self.settings.consumer_secret

    @property
    def callback_url(self) -> str:
        return self.settings.callback_url

    def get_client(self) -> TwitterOAuthClient:
        """Create a provider client for the configured consumer pair."""
        return TwitterOAuthClient(self.consumer_key, self.consumer_secret)

    def get_authorization_url(self, session: MutableMapping[str, Any]) -> str:
        """
        Start a new handshake and return Twitter's authorization URL.

        The fresh request token pair is written to the session and any access
        token pair from an earlier login is cleared.

        Args:
            session (MutableMapping[str, Any]): The host session

        Returns:
            str: URL to redirect the user to

        Raises:
            ProviderError: If Twitter does not issue a request token
        """
        self._twitter = self.get_client()
        url = self._twitter.get_authorization_url(self.callback_url)

        store_request_token(session, self._twitter.request_token, self._twitter.request_token_secret)
        logger.info("Issued Twitter request token, redirecting to authorization")
        return url

    authenticate_twitter_url = get_authorization_url

    def complete_handshake(self, session: MutableMapping[str, Any], verifier: Optional[str]) -> Optional[IdentityRecord]:
        """
        Finish the handshake and verify the user's identity with Twitter.

        If the session already holds an access token pair, the verifier is not
        redeemed again. A freshly redeemed pair is written to the session
        before verification, so a failed verification can be retried.

        Args:
            session (MutableMapping[str, Any]): The host session
            verifier (Optional[str]): The oauth_verifier Twitter sent to the callback

        Returns:
            Optional[IdentityRecord]: The verified identity, or None if the
            identity check failed or returned nothing

        Raises:
            HandshakeError: If the session has no request token or no verifier was given
            ProviderError: If redeeming the verifier fails
        """
        state = HandshakeState.from_session(session)
        if not state.has_request_token:
            raise HandshakeError("no request token present")
        if not verifier:
            raise HandshakeError("no verifier")

        self._twitter = self.get_client()

        access_token, access_token_secret = state.access_token, state.access_token_secret
        if not state.has_access_token:
            self._twitter.set_request_token(state.request_token, state.request_token_secret)
            access_token, access_token_secret = self._twitter.request_access_token(verifier)
            # kept even if verification fails below, the verifier is single use
            store_access_token(session, access_token, access_token_secret)
            logger.info("Redeemed Twitter verifier for an access token")

        self._twitter.set_access_token(access_token, access_token_secret)

        try:
            user_info = self._twitter.verify_credentials()
        except ProviderError as e:
            logger.warning(f"Twitter identity check failed: {str(e)}")
            return None

        if not user_info or not user_info.get("id"):
            logger.warning("Twitter identity check returned no user")
            return None

        self.twitter_user = IdentityRecord(
            provider_user_id=str(user_info["id"]),
            screen_name=user_info.get("screen_name") or "",
            access_token=access_token,
            access_token_secret=access_token_secret,
            name=user_info.get("name") or "",
            profile_image_url=user_info.get("profile_image_url") or "",
        )
        return self.twitter_user

    authenticate_twitter = complete_handshake

    def authenticate(
        self,
        session: MutableMapping[str, Any],
        verifier: Optional[str],
        lookup: UserFinder,
        authinfo: Optional[Dict[str, Any]] = None,
    ) -> Optional[Any]:
        """
        Authenticate the Twitter user and return the matching application user.

        Without ``authinfo`` the handshake is completed (unless this instance
        already holds a verified identity) and the user is looked up by
        ``{"provider_user_id": ...}``. Users implementing IdentityLinkable get
        their screen name and access token pair updated.

        Args:
            session (MutableMapping[str, Any]): The host session
            verifier (Optional[str]): The oauth_verifier Twitter sent to the callback
            lookup (UserFinder): The realm's user finder
            authinfo (Optional[Dict[str, Any]]): Lookup key to use instead of
                running the handshake

        Returns:
            Optional[Any]: The user returned by lookup, or None
        """
        if authinfo is None:
            if self.twitter_user is None and self.complete_handshake(session, verifier) is None:
                return None
            authinfo = self.twitter_user.lookup_key()

        user = lookup(authinfo)
        if user is None:
            logger.info(f"No user found for {authinfo}")
            return None

        if self.twitter_user is not None and isinstance(user, IdentityLinkable):
            user.update_linked_identity(
                screen_name=self.twitter_user.screen_name,
                access_token=self.twitter_user.access_token,
                access_token_secret=self.twitter_user.access_token_secret,
            )

        return user
