# credentials/twitter/__init__.py
"""
Twitter Credential Package
==========================

Provides Sign in with Twitter (OAuth 1.0a) for host framework realms.

Authentication Flow:
------------------
1. The login controller calls authenticate_twitter_url(session) and redirects
   the user to the returned URL
2. Twitter sends the user back to the configured callback with oauth_verifier
3. The callback controller calls authenticate(session, verifier, find_user)
4. The credential redeems the verifier, verifies the identity and looks the
   user up by its Twitter id

TwitterCredential is registered under the service name "twitter" when this
package is imported.
"""

from credentials import register_credential_plugin
from credentials.twitter.credential import TwitterCredential
from credentials.twitter.models import IdentityRecord, HandshakeState

register_credential_plugin(TwitterCredential)

__all__ = ["TwitterCredential", "IdentityRecord", "HandshakeState"]
