"""User preferences stored in the system keyring."""

import json
import logging

import keyring

from vpnman.constants import KEYRING_SERVICE, LAUNCH_AT_LOGIN_KEY, PREFERENCES_KEY

log = logging.getLogger(__name__)


class Preferences:
    """Key-value preferences persisted as one JSON object."""

    def __init__(self, service: str = KEYRING_SERVICE, key: str = PREFERENCES_KEY):
        self.service = service
        self.key = key

    def _load(self) -> dict:
        try:
            data = keyring.get_password(self.service, self.key)
            if data:
                prefs = json.loads(data)
                if isinstance(prefs, dict):
                    return prefs
        except Exception as e:
            log.warning("Could not read preferences: %s", e)
        return {}

    def _save(self, prefs: dict) -> bool:
        try:
            keyring.set_password(self.service, self.key, json.dumps(prefs))
            return True
        except Exception as e:
            log.error("Could not save preferences: %s", e)
            return False

    def get_bool(self, name: str, default: bool = False) -> bool:
        return bool(self._load().get(name, default))

    def set_bool(self, name: str, value: bool) -> bool:
        prefs = self._load()
        prefs[name] = bool(value)
        return self._save(prefs)

    @property
    def launch_at_login(self) -> bool:
        return self.get_bool(LAUNCH_AT_LOGIN_KEY)

    @launch_at_login.setter
    def launch_at_login(self, value: bool):
        self.set_bool(LAUNCH_AT_LOGIN_KEY, value)
