from __future__ import annotations

import enum
import json
import keyring


class ConfigKey(enum.StrEnum):
    CF_ZONE_ID = "CF_ZONE_ID"
    CF_API_TOKEN = "CF_API_TOKEN"


class KeyringConfig(dict[ConfigKey, str]):
    KR_SERVICE_NAME: str = "purge-bridge"
    KR_USERNAME: str = "config"

    def __enter__(self) -> KeyringConfig:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.save()

    @classmethod
    def load_from_keyring(cls) -> KeyringConfig:
        """Load the stored secrets from the keyring."""
        json_str = keyring.get_password(cls.KR_SERVICE_NAME, cls.KR_USERNAME)
        if json_str is None:
            return cls()
        return cls.from_json(json_str)

    @classmethod
    def from_json(cls, json_str: str) -> KeyringConfig:
        data = json.loads(json_str)
        # unknown keys from older versions are dropped
        return cls(
            {ConfigKey(k): v for k, v in data.items() if k in ConfigKey.__members__}
        )

    def value_of(self, key: ConfigKey) -> str:
        """Stored value, or empty string when not set."""
        return (self.get(key) or "").strip()

    def save(self):
        """Save the configuration to the keyring."""
        json_str = json.dumps(self)
        keyring.set_password(self.KR_SERVICE_NAME, self.KR_USERNAME, json_str)

    def to_keys_json(self) -> str:
        """Render stored keys with secrets masked."""
        result = {}
        for key in ConfigKey:
            if key in self:
                if self[key]:
                    # valid key
                    result[key] = "********"
                else:
                    # empty key
                    result[key] = ""
            else:
                # missing key
                result[key] = "(not set)"

        return json.dumps(result, indent=2)
