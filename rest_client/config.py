# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Client settings loaded from an optional YAML file and the environment.

Environment variables take precedence over the file:
    REST_CLIENT_BASE_URL, REST_CLIENT_TIMEOUT, REST_CLIENT_VERIFY_TLS
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

logger = logging.getLogger(__name__)

ENV_BASE_URL = "REST_CLIENT_BASE_URL"
ENV_TIMEOUT = "REST_CLIENT_TIMEOUT"
ENV_VERIFY_TLS = "REST_CLIENT_VERIFY_TLS"

DEFAULT_TIMEOUT_SECONDS = 30.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigurationError(ValueError):
    """Settings are missing or invalid."""


@dataclass(frozen=True)
class ClientSettings:
    """Connection settings for the REST client.

    Attributes:
        base_url: Server root, e.g. ``http://localhost:9200``.
        timeout_seconds: Per-request timeout.
        verify_tls: Whether to verify server certificates.
        headers: Extra headers sent with every request.
    """

    base_url: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    verify_tls: bool = True
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate URL scheme and timeout."""
        if not self.base_url or not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"base_url must start with http:// or https://, got {self.base_url!r}"
            )
        if self.timeout_seconds <= 0:
            raise ConfigurationError(
                f"timeout_seconds must be positive, got {self.timeout_seconds}"
            )
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"settings file {path} must contain a mapping")
    return raw


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


def _parse_timeout(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"timeout must be a number, got {value!r}") from exc


def load_settings(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ClientSettings:
    """Load client settings.

    Args:
        path: Optional YAML file with ``base_url``, ``timeout_seconds``,
            ``verify_tls`` and ``headers`` keys.
        environ: Environment mapping, defaults to ``os.environ``.

    Returns:
        Validated ClientSettings.

    Raises:
        FileNotFoundError: If ``path`` is given but does not exist.
        ConfigurationError: If a value is missing or invalid.
    """
    env = os.environ if environ is None else environ
    raw: Dict[str, Any] = {}
    if path is not None:
        settings_path = Path(path)
        if not settings_path.exists():
            raise FileNotFoundError(f"settings file not found: {settings_path}")
        raw = _read_yaml(settings_path)
        logger.debug("Loaded client settings from %s", settings_path)

    base_url = env.get(ENV_BASE_URL) or raw.get("base_url")
    if not base_url:
        raise ConfigurationError(
            f"base_url is not configured; set {ENV_BASE_URL} or provide a settings file"
        )

    timeout = env.get(ENV_TIMEOUT, raw.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS))
    verify_tls = env.get(ENV_VERIFY_TLS, raw.get("verify_tls", True))
    headers = raw.get("headers") or {}
    if not isinstance(headers, dict):
        raise ConfigurationError("headers must be a mapping")

    return ClientSettings(
        base_url=str(base_url),
        timeout_seconds=_parse_timeout(timeout),
        verify_tls=_parse_bool("verify_tls", verify_tls),
        headers={str(k): str(v) for k, v in headers.items()},
    )
