from __future__ import annotations

import os
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_BASE_URL = "http://applications.opap.gr/"
DEFAULT_DRAWS_ENDPOINT = "DrawsRestServices"


def _str_from_env(key: str, default: str) -> str:
    value = os.getenv(key)
    if value is None or value == "":
        return default
    return value


def _float_from_env(value: Optional[str], default: Optional[float]) -> Optional[float]:
    if value is None or value == "":
        return default
    return float(value)


@dataclass(frozen=True)
class ClientSettings:
    base_url: str = DEFAULT_BASE_URL
    draws_endpoint: str = DEFAULT_DRAWS_ENDPOINT
    timeout_seconds: Optional[float] = None

    def copy(self, **updates) -> "ClientSettings":
        return replace(self, **updates)


def load_from_environment() -> ClientSettings:
    return ClientSettings(
        base_url=_str_from_env("OPAP_BASE_URL", DEFAULT_BASE_URL),
        draws_endpoint=_str_from_env("OPAP_DRAWS_ENDPOINT", DEFAULT_DRAWS_ENDPOINT),
        timeout_seconds=_float_from_env(os.getenv("OPAP_TIMEOUT_SECONDS"), None),
    )


@lru_cache(maxsize=1)
def load_settings(dotenv_path: Optional[str] = None) -> ClientSettings:
    """Read client settings from the environment, after loading a .env file.

    Without `dotenv_path` the nearest .env above the working directory is
    used, if any. Variables already set in the environment win over the file.

    Nothing in the client calls this; applications that want environment
    driven settings pass the result to `Client.from_settings`.
    """
    path = dotenv_path or find_dotenv(usecwd=True)
    if path:
        load_dotenv(path, override=False)
    return load_from_environment()
