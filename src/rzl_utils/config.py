"""Configuration utilities for RZL Utils.

The base-URL helpers read the environment at call time, so tests can stub
it with ``monkeypatch.setenv``:

- ``RZL_BASE_URL`` / ``RZL_PORT_FE``: frontend origin (`get_base_url`).
- ``RZL_BACKEND_API_URL`` / ``RZL_PORT_BE``: backend API origin
  (`get_be_api_url`, `create_be_api_url`).

The CLI additionally reads ``RZL_LOG_PATH``, ``RZL_FLIGHT_RECORDER_CAPACITY``
and ``RZL_LOGGER_LEVELS`` (see `rzl_utils.cli.main`).
"""

import logging
import os
from urllib.parse import urlsplit

from .assertions import assert_is_boolean, assert_is_string
from .errors import EnvironmentUrlError
from .kinds import get_precise_type
from .strings.sanitize import remove_spaces
from .urls.builders import format_env_port
from .urls.pathname import normalize_pathname

logger = logging.getLogger(__name__)

BASE_URL_ENV = "RZL_BASE_URL"  # pragma: no mutate
PORT_FE_ENV = "RZL_PORT_FE"  # pragma: no mutate
BACKEND_API_URL_ENV = "RZL_BACKEND_API_URL"  # pragma: no mutate
PORT_BE_ENV = "RZL_PORT_BE"  # pragma: no mutate
LOG_PATH_ENV = "RZL_LOG_PATH"  # pragma: no mutate
FLIGHT_RECORDER_CAPACITY_ENV = "RZL_FLIGHT_RECORDER_CAPACITY"  # pragma: no mutate
LOGGER_LEVELS_ENV = "RZL_LOGGER_LEVELS"  # pragma: no mutate

DEFAULT_BASE_URL = "http://localhost"
DEFAULT_FE_PORT = "3000"
DEFAULT_BE_PORT = "8000"
DEFAULT_API_PREFIX = "/api"

DEFAULT_PORTS = {"http": 80, "https": 443}


def _env(name: str) -> str:
    return os.environ.get(name, "").strip()


def _origin(url: str, variable: str) -> str:
    """Return ``scheme://host[:port]`` of ``url``, dropping default ports.

    IPv6 hosts keep their brackets (``http://[::1]:3000``).
    """
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError as exc:
        raise EnvironmentUrlError(variable, url) from exc
    if parts.scheme not in DEFAULT_PORTS or not parts.hostname:
        raise EnvironmentUrlError(variable, url)
    host = f"[{parts.hostname}]" if ":" in parts.hostname else parts.hostname
    if port is None or port == DEFAULT_PORTS[parts.scheme]:
        return f"{parts.scheme}://{host}"
    return f"{parts.scheme}://{host}:{port}"


def _with_port(url: str, port_env: str, variable: str) -> str:
    """Return the origin of ``url``, adding ``port_env`` when ``url`` has no port."""
    origin = _origin(url, variable)
    if port_env and urlsplit(url).port is None:
        return _origin(origin + format_env_port(port_env, prefix_colon=True), variable)
    return origin


def get_base_url() -> str:
    """Get the frontend origin from the environment.

    ``RZL_BASE_URL`` defaults to ``http://localhost``. Without an explicit
    port in it, ``RZL_PORT_FE`` is appended; when neither variable is set
    the port defaults to ``3000``.

    Returns:
        str: The origin, e.g. ``http://localhost:3000``.

    Raises:
        EnvironmentUrlError: If ``RZL_BASE_URL`` is not a valid http(s) URL.
    """
    base_env, port_env = _env(BASE_URL_ENV), _env(PORT_FE_ENV)
    if not base_env:
        logger.debug("%s is not set, using %s", BASE_URL_ENV, DEFAULT_BASE_URL)
        return _with_port(DEFAULT_BASE_URL, port_env or DEFAULT_FE_PORT, BASE_URL_ENV)
    return _with_port(remove_spaces(base_env), port_env, BASE_URL_ENV)


def get_be_api_url(suffix: str = "/") -> str:
    """Get the backend API base URL from the environment.

    ``RZL_BACKEND_API_URL`` defaults to ``http://localhost`` with port
    ``RZL_PORT_BE`` (default ``8000``). ``RZL_PORT_BE`` is also applied to a
    configured URL that has no port of its own.

    Args:
        suffix: Path appended to the origin; blank means ``"/"``.

    Returns:
        str: The origin followed by ``suffix`` without its trailing slash.

    Raises:
        TypeError: If ``suffix`` is not a string.
        EnvironmentUrlError: If ``RZL_BACKEND_API_URL`` is not a valid URL.

    Examples:
        With no variables set, ``get_be_api_url("/api/")`` returns
        ``"http://localhost:8000/api"``.
    """
    assert_is_string(
        suffix,
        message=lambda current_type, valid_type: (
            f"Parameter `suffix` must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    raw_url, port_env = _env(BACKEND_API_URL_ENV), _env(PORT_BE_ENV)
    if raw_url:
        base_api_url = _with_port(remove_spaces(raw_url), port_env, BACKEND_API_URL_ENV)
    else:
        logger.debug("%s is not set, using %s", BACKEND_API_URL_ENV, DEFAULT_BASE_URL)
        base_api_url = _with_port(
            DEFAULT_BASE_URL, port_env or DEFAULT_BE_PORT, BACKEND_API_URL_ENV
        )

    suffix = remove_spaces(suffix) or "/"
    if suffix == "/":
        return f"{base_api_url}/"
    return f"{base_api_url}{'' if suffix.startswith('/') else '/'}{suffix.rstrip('/')}"


def _join_path(left: str, right: str) -> str:
    return f"{left.rstrip('/')}/{right.lstrip('/')}"


def create_be_api_url(
    pathname: str | None, *, prefix: str = DEFAULT_API_PREFIX, with_origin: bool = True
) -> str:
    """Build a backend API URL for ``pathname``.

    ``prefix`` is not repeated when ``pathname`` already starts with it.

    Args:
        pathname: API path, e.g. ``"/users"``; None means the API root.
        prefix: API prefix placed between the origin and ``pathname``.
        with_origin: Include the backend origin; otherwise return a path.

    Returns:
        str: The URL (or path) without a trailing slash.

    Raises:
        TypeError: If an argument has the wrong kind.
        EnvironmentUrlError: If the backend URL in the environment is invalid.

    Examples:
        With no variables set, ``create_be_api_url("/api/users")`` and
        ``create_be_api_url("users")`` both return
        ``"http://localhost:8000/api/users"``.
    """
    assert_is_string(
        "" if pathname is None else pathname,
        message=lambda current_type, valid_type: (
            f"First parameter (`pathname`) must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    if not isinstance(prefix, str):
        raise TypeError(
            "Parameter `prefix` must be of type `string`, "
            f"but received: `{get_precise_type(prefix)}`."
        )
    assert_is_boolean(
        with_origin,
        message=lambda current_type, valid_type: (
            f"Parameter `with_origin` must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )

    path: str = normalize_pathname(pathname)  # type: ignore[assignment]
    api_prefix: str = normalize_pathname(prefix)  # type: ignore[assignment]
    prefix_dir = api_prefix if api_prefix.endswith("/") else f"{api_prefix}/"
    if path in (api_prefix, f"{api_prefix}/") or path.startswith(prefix_dir):
        path = normalize_pathname(path[len(api_prefix) :])  # type: ignore[assignment]

    base_api_url = get_be_api_url(api_prefix)
    if with_origin:
        full_path = _join_path(base_api_url, path)
    else:
        full_path = _join_path(urlsplit(base_api_url).path, path)
    return full_path.rstrip("/")
