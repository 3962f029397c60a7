# credentials/__init__.py
"""
Credential Plugin System
========================

This module provides the foundation for the credential plugins used by a host
web framework's authentication realms. It defines the base interface that all
credential plugins implement and a registry through which a realm finds the
plugin configured for it.

A credential plugin verifies an end user against an external identity
provider and hands a normalized identity back to the realm, which maps it to
an application user. Session storage, routing and user persistence stay with
the host framework.

Plugin Lifecycle:
---------------
1. Plugin classes are defined in their own packages (e.g. credentials.twitter)
2. Each package registers its plugins on import
3. A realm creates one plugin instance per login attempt
4. The realm calls the plugin's authenticate method with the request session

Adding a New Plugin:
------------------
1. Create a new package under 'credentials/'
2. Implement a CredentialPlugin subclass
3. Register it in the __init__.py of your package
"""

from typing import Dict, Type, Optional, Any
import logging

logger = logging.getLogger(__name__)


class CredentialPlugin:
    """
    Base class for credential plugins.

    Credential plugins are responsible for:
    - Resolving their provider configuration at construction
    - Running the provider's login handshake against a session mapping
    - Looking up the application user through the realm's user finder

    Class Attributes:
        service_name (str): Unique identifier for the provider this plugin supports
                           (e.g., "twitter")
    """

    service_name: str

    @classmethod
    def get_metadata(cls) -> Dict[str, Any]:
        """
        Return metadata about the plugin for discovery and introspection.

        Returns:
            Dict[str, Any]: Dictionary containing the service name and class name
        """
        return {
            "service_name": cls.service_name,
            "class_name": cls.__name__
        }

    def authenticate(self, session, verifier, lookup, authinfo=None):
        """
        Authenticate the end user and return the application user, if any.

        Args:
            session: Mutable mapping holding the per-login handshake state
            verifier: Provider-issued value proving the user authorized the login
            lookup: The realm's user finder, called with the lookup key
            authinfo: Optional lookup key that bypasses the provider handshake

        Returns:
            The user object returned by lookup, or None

        Raises:
            NotImplementedError: If the subclass doesn't implement this method
        """
        raise NotImplementedError("Subclasses must implement authenticate")


# Plugin registry
_credential_plugins: Dict[str, Type[CredentialPlugin]] = {}


def register_credential_plugin(plugin_class: Type[CredentialPlugin]) -> None:
    """
    Register a credential plugin with the system.

    Each plugin is registered under its service_name; registering another class
    under the same name replaces the previous one.

    Args:
        plugin_class (Type[CredentialPlugin]): The credential plugin class to register

    Example:
        >>> class MyCredential(CredentialPlugin):
        ...     service_name = "my_service"
        >>> register_credential_plugin(MyCredential)
    """
    _credential_plugins[plugin_class.service_name] = plugin_class
    logger.info(f"Registered credential plugin: {plugin_class.service_name}")


def get_credential_plugin(service_name: str) -> Optional[Type[CredentialPlugin]]:
    """
    Get a credential plugin class by its service name.

    Args:
        service_name (str): The unique service name of the plugin to retrieve

    Returns:
        Optional[Type[CredentialPlugin]]: The plugin class if found, None otherwise
    """
    return _credential_plugins.get(service_name)


def get_all_credential_plugins() -> Dict[str, Type[CredentialPlugin]]:
    """
    Get all registered credential plugins.

    The dictionary is a copy of the internal registry, so modifying it will
    not affect the registry.
    """
    return _credential_plugins.copy()


def create_credential_plugin(service_name: str, **kwargs) -> Optional[CredentialPlugin]:
    """
    Create an instance of a credential plugin.

    Args:
        service_name (str): The service name of the plugin to instantiate
        **kwargs: Arguments passed to the plugin constructor

    Returns:
        Optional[CredentialPlugin]: The plugin instance, or None if no plugin
        is registered under service_name
    """
    plugin_class = get_credential_plugin(service_name)
    if not plugin_class:
        logger.warning(f"Credential plugin not found: {service_name}")
        return None
    return plugin_class(**kwargs)
