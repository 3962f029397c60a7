"""
Shared pytest fixtures and configuration
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add the project root to Python path to make imports work
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set test environment variables
os.environ["TWITTER_CONSUMER_KEY"] = "env_consumer_key"
os.environ["TWITTER_CONSUMER_SECRET"] = "env_consumer_secret"
os.environ["TWITTER_CALLBACK_URL"] = "http://testserver/env/callback"

import credentials
from credentials.twitter import TwitterCredential
from credentials.twitter.client import TwitterOAuthClient


@pytest.fixture
def twitter_config():
    """
    Complete credential configuration for the Twitter plugin.
    """
    return {
        "consumer_key": "test_consumer_key",
        "consumer_secret": "test_consumer_secret",
        "callback_url": "http://testserver/twitter/callback",
    }


@pytest.fixture
def session():
    """
    An empty host session.
    """
    return {}


@pytest.fixture
def authorized_session():
    """
    A session in which the user has just come back from Twitter's authorization page.
    """
    return {
        "request_token": "abc",
        "request_token_secret": "hush",
        "access_token": "",
        "access_token_secret": "",
    }


@pytest.fixture
def mock_twitter_client():
    """
    Mock the TwitterOAuthClient so no request reaches Twitter.
    """
    client = MagicMock(spec=TwitterOAuthClient)
    client.request_token = "abc"
    client.request_token_secret = "hush"
    client.get_authorization_url.return_value = (
        "https://api.twitter.com/oauth/authenticate?oauth_token=abc"
        "&oauth_callback=http://testserver/twitter/callback"
    )
    client.request_access_token.return_value = ("access_token", "access_token_secret")
    client.verify_credentials.return_value = {
        "id": "yanick",
        "screen_name": "yanick",
        "name": "Yanick",
        "profile_image_url": "https://example.com/yanick.jpg",
    }
    return client


@pytest.fixture
def twitter_credential(twitter_config, mock_twitter_client):
    """
    A TwitterCredential whose provider client is the mock client.
    """
    credential = TwitterCredential(config=twitter_config, app_config={})
    with patch.object(credential, "get_client", return_value=mock_twitter_client):
        yield credential


@pytest.fixture
def clean_registry():
    """
    Restore the credential plugin registry after the test.
    """
    saved = credentials.get_all_credential_plugins()
    yield
    credentials._credential_plugins.clear()
    credentials._credential_plugins.update(saved)
