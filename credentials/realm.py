# credentials/realm.py
"""
Realm integration
=================

A realm is the host framework's named authentication slot. It pairs a
credential plugin (looked up by service name in the registry) with the
realm's own configuration and the function that finds application users.

The host supplies three narrow collaborators:
- a session mapping, read and written by the credential plugin
- a user finder, called with a lookup key built from the verified identity
- optionally, users implementing IdentityLinkable so the plugin can sync the
  provider-linked fields on login
"""

import logging
from typing import Any, Callable, Dict, Mapping, MutableMapping, Optional, Protocol, runtime_checkable

from credentials import CredentialPlugin, create_credential_plugin
from credentials.exceptions import ConfigError

logger = logging.getLogger(__name__)

UserFinder = Callable[[Dict[str, Any]], Optional[Any]]


@runtime_checkable
class IdentityLinkable(Protocol):
    """
    Capability of a host user object to store its provider-linked identity.

    Users that do not implement it are returned untouched.
    """

    def update_linked_identity(self, screen_name: str, access_token: str, access_token_secret: str) -> None:
        ...


class Realm:
    """
    Named authentication slot binding a credential plugin to a user finder.

    Args:
        name (str): The realm name
        credential (str): Service name of the credential plugin, e.g. "twitter"
        find_user (UserFinder): The realm's user finder
        config (Mapping[str, Any]): Realm-specific configuration; wins over the
            credential configuration
        credential_config (Mapping[str, Any]): Configuration for the credential plugin
        app_config (Mapping[str, Any]): Application-wide configuration
    """

    def __init__(
        self,
        name: str,
        credential: str,
        find_user: UserFinder,
        config: Optional[Mapping[str, Any]] = None,
        credential_config: Optional[Mapping[str, Any]] = None,
        app_config: Optional[Mapping[str, Any]] = None,
    ):
        self.name = name
        self.credential = credential
        self.find_user = find_user
        self.config = dict(config or {})
        self.credential_config = dict(credential_config or {})
        self.app_config = app_config

    def get_credential(self) -> CredentialPlugin:
        """
        Create a credential plugin instance for one login attempt.

        Raises:
            ConfigError: If no plugin is registered under the realm's credential name,
                or the plugin's configuration is incomplete
        """
        plugin = create_credential_plugin(
            self.credential,
            config=self.credential_config,
            app_config=self.app_config,
            realm_config=self.config,
        )
        if plugin is None:
            raise ConfigError(f"credential {self.credential} not registered")
        return plugin

    def authenticate(self, session: MutableMapping[str, Any], verifier: Optional[str] = None,
                     authinfo: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        """Run a full login against this realm and return the application user, or None."""
        logger.debug(f"Authenticating against realm {self.name}")
        return self.get_credential().authenticate(session, verifier, self.find_user, authinfo=authinfo)
