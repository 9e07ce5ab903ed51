"""Supabase connection settings resolved once at application start."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigurationError

# Mapping of configuration keys to their corresponding environment variables
_STORE_ENV_VARS = {
    "url": "SUPABASE_URL",
    "key": "SUPABASE_KEY",
    "service_role_key": "SUPABASE_SERVICE_ROLE_KEY",
    "access_level": "SUPABASE_ACCESS_LEVEL",
}

_REQUIRED = ("url", "key")


class AccessLevel(enum.Enum):
    """Privilege level used when talking to the store."""

    RESTRICTED = "restricted"
    ELEVATED = "elevated"


@dataclass(frozen=True)
class StoreSettings:
    url: str
    key: str
    service_role_key: Optional[str] = None
    access_level: AccessLevel = AccessLevel.RESTRICTED

    def api_key(self) -> str:
        """Return the key matching ``access_level``.

        Elevated access never falls back to the public key: a missing service
        role key is a configuration error.
        """

        if self.access_level is AccessLevel.ELEVATED:
            if not self.service_role_key:
                raise ConfigurationError(
                    "Elevated store access requires SUPABASE_SERVICE_ROLE_KEY"
                )
            return self.service_role_key
        return self.key


def load_store_settings(environ: Mapping[str, str] | None = None) -> StoreSettings:
    """Return store settings from ``environ`` (defaults to ``os.environ``).

    ``SUPABASE_URL`` and ``SUPABASE_KEY`` are required. The access level is
    validated here so that a misconfigured deployment fails at startup rather
    than on the first request.
    """

    environ = os.environ if environ is None else environ
    values = {k: (environ.get(env) or "").strip() for k, env in _STORE_ENV_VARS.items()}

    missing = [_STORE_ENV_VARS[k] for k in _REQUIRED if not values[k]]
    if missing:
        raise ConfigurationError(
            f"Missing required store configuration: {', '.join(missing)}"
        )

    level_name = values["access_level"].lower() or AccessLevel.RESTRICTED.value
    try:
        access_level = AccessLevel(level_name)
    except ValueError:
        raise ConfigurationError(
            f"Invalid SUPABASE_ACCESS_LEVEL {level_name!r}; "
            f"expected one of {', '.join(a.value for a in AccessLevel)}"
        ) from None

    settings = StoreSettings(
        url=values["url"],
        key=values["key"],
        service_role_key=values["service_role_key"] or None,
        access_level=access_level,
    )
    settings.api_key()
    return settings


__all__ = ["AccessLevel", "StoreSettings", "load_store_settings"]
