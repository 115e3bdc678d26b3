import logging
from typing import Any, MutableMapping, Optional

from presentations.api_client import PresentationApiClient

logger = logging.getLogger("presentations.services.session_gate")

AUTH_KEY = "auth"
TOKEN_KEY = "auth_token"


class SessionGate:
    """Password gate backed by a per-browser-session store (``st.session_state``).

    The flag only gates rendering. When the backend also issues a token it is
    kept next to the flag and attached to later requests.
    """

    def __init__(self, store: MutableMapping[str, Any], api: PresentationApiClient):
        self.store = store
        self.api = api
        self.api.token = self.token

    @property
    def is_authenticated(self) -> bool:
        return self.store.get(AUTH_KEY) == "true"

    @property
    def token(self) -> Optional[str]:
        return self.store.get(TOKEN_KEY)

    async def login(self, password: str):
        """Raises AuthError when the password is rejected or the backend is unreachable."""
        logger.debug("Login attempt")
        token = await self.api.verify_password(password)
        self.store[AUTH_KEY] = "true"
        if token:
            self.store[TOKEN_KEY] = token
        self.api.token = token
        logger.info("Login succeeded (token issued: %s)", bool(token))

    def logout(self):
        self.store.pop(AUTH_KEY, None)
        self.store.pop(TOKEN_KEY, None)
        self.api.token = None
        logger.info("Logged out")
