"""
Sign-in state for the single demo account.

The session is an explicit object passed to routing and views. Its only
persisted state is one marker in a mapping store (``st.session_state`` in
the app): the key ``"auth"`` holding ``{"username": ...}`` as JSON.
Presence of a parseable marker means signed in.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import MutableMapping, Optional

from config import AppConfig

logger = logging.getLogger(__name__)

AUTH_KEY = "auth"
_UNPARSEABLE = object()


@dataclass
class AuthSession:
    store: MutableMapping[str, object]
    authenticated: bool = False
    username: Optional[str] = None

    @classmethod
    def initialize(cls, store: MutableMapping[str, object]) -> "AuthSession":
        """Restore from the persisted marker; an unparseable marker is dropped."""
        session = cls(store=store)
        raw = store.get(AUTH_KEY)
        if raw is None:
            return session
        try:
            data = json.loads(raw) if isinstance(raw, (str, bytes)) else _UNPARSEABLE
        except ValueError:
            data = _UNPARSEABLE
        if data is _UNPARSEABLE:
            logger.error("Failed to parse stored auth data; clearing it")
            store.pop(AUTH_KEY, None)
            return session

        username = data.get("username") if isinstance(data, dict) else None
        session.authenticated = True
        session.username = str(username) if username is not None else None
        return session

    def authenticate(self, username: str, password: str, cfg: AppConfig) -> bool:
        if username == cfg.demo_username and password == cfg.demo_password:
            self.authenticated = True
            self.username = username
            self.store[AUTH_KEY] = json.dumps({"username": username})
            logger.info("User %s signed in", username)
            return True
        logger.info("Rejected sign-in for %r", username)
        return False

    def clear(self) -> None:
        if self.username:
            logger.info("User %s signed out", self.username)
        self.authenticated = False
        self.username = None
        self.store.pop(AUTH_KEY, None)
