"""
Environment configuration for graphy.

Determines the runtime environment and whether the parser emits DEBUG traces
of token streams and parse results.

Environment values (GRAPHY_ENV):
    - development (default): parse tracing enabled
    - test: parse tracing disabled by default
    - production: parse tracing disabled by default

GRAPHY_TRACE_PARSE overrides the environment default with an explicit
truthy/falsy value.

Usage:
    from graphy.core.environment import get_graphy_env, should_trace_parsing

    env = get_graphy_env()  # Returns "development", "test", or "production"

    if should_trace_parsing():
        logger.debug("tokens: %s", tokens)
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum

logger = logging.getLogger(__name__)


class GraphyEnv(StrEnum):
    """Runtime environment values."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


_DEFAULT_ENV = GraphyEnv.DEVELOPMENT

GRAPHY_ENV_VAR = "GRAPHY_ENV"
GRAPHY_TRACE_PARSE_VAR = "GRAPHY_TRACE_PARSE"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

# Unrecognised GRAPHY_TRACE_PARSE values already reported
_warned_trace_values: set[str] = set()


def get_graphy_env() -> GraphyEnv:
    """Get the current graphy environment from GRAPHY_ENV.

    Returns:
        GraphyEnv: The current environment (development, test, or production).
        Defaults to development if GRAPHY_ENV is not set or invalid.

    Examples:
        >>> import os
        >>> os.environ["GRAPHY_ENV"] = "production"
        >>> get_graphy_env()
        <GraphyEnv.PRODUCTION: 'production'>
    """
    env_value = os.environ.get(GRAPHY_ENV_VAR, "").lower().strip()

    if env_value in ("production", "prod"):
        return GraphyEnv.PRODUCTION
    elif env_value in ("test", "testing"):
        return GraphyEnv.TEST
    elif env_value in ("development", "dev", ""):
        return GraphyEnv.DEVELOPMENT
    else:
        logger.warning(
            "Unknown GRAPHY_ENV value '%s'. "
            "Valid values: development, test, production. Defaulting to development.",
            env_value,
        )
        return _DEFAULT_ENV


def is_production() -> bool:
    """Check if running in production environment."""
    return get_graphy_env() == GraphyEnv.PRODUCTION


def is_development() -> bool:
    """Check if running in development environment."""
    return get_graphy_env() == GraphyEnv.DEVELOPMENT


def should_trace_parsing(override: bool | None = None) -> bool:
    """Determine if the parser should log DEBUG traces.

    Resolution order:
    1. If override is explicitly set (True/False), use it
    2. If GRAPHY_TRACE_PARSE holds a recognised truthy/falsy value, use it
    3. Otherwise, use environment defaults:
       - development: True
       - test: False
       - production: False

    Args:
        override: Explicit setting from the caller. None means "use the
            environment".

    Returns:
        bool: Whether to trace tokenization and parsing.
    """
    if override is not None:
        return override

    raw = os.environ.get(GRAPHY_TRACE_PARSE_VAR, "").lower().strip()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    if raw and raw not in _warned_trace_values:
        _warned_trace_values.add(raw)
        logger.warning("Ignoring unrecognised %s value '%s'", GRAPHY_TRACE_PARSE_VAR, raw)

    return is_development()
