# credentials/twitter/client.py
"""
Twitter OAuth 1.0a provider client.

A thin wrapper around tweepy's OAuth1UserHandler that holds the request and
access token pairs of one login attempt. Request signing and transport are
left to tweepy; tweepy failures surface as ProviderError.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import tweepy

from credentials.exceptions import ProviderError

logger = logging.getLogger(__name__)


class TwitterOAuthClient:
    """
    Provider client scoped to one consumer key/secret pair.

    No network call happens until get_authorization_url, request_access_token
    or verify_credentials is invoked.
    """

    def __init__(self, consumer_key: str, consumer_secret: str):
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.request_token = ""
        self.request_token_secret = ""
        self.access_token = ""
        self.access_token_secret = ""

    def get_oauth_handler(self, callback_url: Optional[str] = None) -> tweepy.OAuth1UserHandler:
        """
        Get a Twitter OAuth handler instance.

        Args:
            callback_url (Optional[str]): Callback URL sent with the request token request

        Returns:
            tweepy.OAuth1UserHandler: Configured OAuth handler
        """
        return tweepy.OAuth1UserHandler(
            self.consumer_key,
            self.consumer_secret,
            callback=callback_url
        )

    def get_authorization_url(self, callback_url: str, signin_with_twitter: bool = True) -> str:
        """
        Fetch a fresh request token and return the URL to send the user to.

        The request token pair is kept on the client afterwards.

        Raises:
            ProviderError: If the request token could not be obtained
        """
        auth = self.get_oauth_handler(callback_url)
        try:
            redirect_url = auth.get_authorization_url(signin_with_twitter=signin_with_twitter)
        except tweepy.TweepyException as e:
            logger.error(f"Twitter request token error: {str(e)}")
            raise ProviderError(f"Failed to get Twitter request token: {str(e)}") from e

        self.request_token = auth.request_token["oauth_token"]
        self.request_token_secret = auth.request_token["oauth_token_secret"]
        return redirect_url

    def set_request_token(self, token: str, secret: str) -> None:
        self.request_token = token
        self.request_token_secret = secret

    def set_access_token(self, token: str, secret: str) -> None:
        self.access_token = token
        self.access_token_secret = secret

    def request_access_token(self, verifier: str) -> Tuple[str, str]:
        """
        Redeem the verifier for an access token pair.

        Uses the request token pair currently held by the client.

        Raises:
            ProviderError: If Twitter rejects the exchange or returns an empty pair
        """
        auth = self.get_oauth_handler()
        auth.request_token = {
            "oauth_token": self.request_token,
            "oauth_token_secret": self.request_token_secret,
        }

        try:
            access_token, access_token_secret = auth.get_access_token(verifier)
        except tweepy.TweepyException as e:
            logger.error(f"Twitter access token error: {str(e)}")
            raise ProviderError(f"Failed to get Twitter access token: {str(e)}") from e

        if not access_token or not access_token_secret:
            raise ProviderError("Twitter returned an empty access token")

        self.set_access_token(access_token, access_token_secret)
        return access_token, access_token_secret

    def verify_credentials(self) -> Optional[Dict[str, Any]]:
        """
        Call Twitter's verify_credentials endpoint with the current access token.

        Returns:
            Optional[Dict[str, Any]]: The user's id, screen_name, name and
            profile image URL, or None if Twitter returned no user

        Raises:
            ProviderError: If the call fails or the user has no id
        """
        auth = self.get_oauth_handler()
        auth.access_token = self.access_token
        auth.access_token_secret = self.access_token_secret

        try:
            api = tweepy.API(auth)
            user = api.verify_credentials()
        except tweepy.TweepyException as e:
            logger.error(f"Twitter verify_credentials error: {str(e)}")
            raise ProviderError(f"Failed to verify Twitter credentials: {str(e)}") from e

        if not user:
            return None

        user_id = getattr(user, "id_str", None)
        if not user_id:
            logger.error("Twitter verify_credentials returned a user without id_str")
            raise ProviderError("Twitter returned a user without an id")

        return {
            "id": user_id,
            "screen_name": getattr(user, "screen_name", "") or "",
            "name": getattr(user, "name", "") or "",
            "profile_image_url": getattr(user, "profile_image_url_https", "") or ""
        }
