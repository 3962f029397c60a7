# credentials/exceptions.py
"""
Exceptions raised by credential plugins.

All of them derive from ValueError so existing callers that catch ValueError
around a login keep working.
"""


class CredentialError(ValueError):
    """Base class for credential plugin errors."""


class ConfigError(CredentialError):
    """A required provider setting is missing after merging configuration sources."""


class HandshakeError(CredentialError):
    """The session holds no request token, or no verifier was supplied."""


class ProviderError(CredentialError):
    """The identity provider could not be reached or rejected a request."""
