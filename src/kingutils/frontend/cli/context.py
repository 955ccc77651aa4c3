"""Small helper to build the KingUtils app context for the TUI."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from kingutils.core.exceptions import InitializationError, KingUtilsError
from kingutils.frontend.cli.logging_config import resolve_level
from kingutils.security.algorithms import HashAlgorithm
from kingutils.security.envelope import (
    DEFAULT_HASH_ALGORITHM,
    DEFAULT_ITERATIONS,
    DEFAULT_SALT_LENGTH,
    MAX_ITERATIONS,
)

ENV_SALT_LENGTH = "KINGUTILS_SALT_LENGTH"
ENV_ITERATIONS = "KINGUTILS_ITERATIONS"
ENV_HASH_ALGORITHM = "KINGUTILS_HASH_ALGORITHM"
ENV_LOG_LEVEL = "KINGUTILS_LOG_LEVEL"


@dataclass(frozen=True)
class EnvelopeSettings:
    """Parameters used for every encrypt issued from the UI."""

    salt_length: int = DEFAULT_SALT_LENGTH
    iterations: int = DEFAULT_ITERATIONS
    hash_algorithm: HashAlgorithm = DEFAULT_HASH_ALGORITHM


@dataclass
class AppContext:
    """Container for runtime objects the UI needs."""

    settings: EnvelopeSettings = field(default_factory=EnvelopeSettings)
    log_level: int = logging.INFO


def _int_from_env(env: Mapping[str, str], name: str, default: int, minimum: int, maximum: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise InitializationError(f"{name} must be an integer, got {raw!r}") from None
    if not minimum <= value <= maximum:
        raise InitializationError(f"{name} must be between {minimum} and {maximum}, got {value}")
    return value


def build_context(environ: Optional[Mapping[str, str]] = None) -> AppContext:
    """
    Build the app context from environment variables.

    - ``KINGUTILS_SALT_LENGTH``: salt size in bytes (default 16)
    - ``KINGUTILS_ITERATIONS``: PBKDF2 iteration count (default 100000)
    - ``KINGUTILS_HASH_ALGORITHM``: PBKDF2 hash, e.g. ``SHA256`` or ``sha3-512``
    - ``KINGUTILS_LOG_LEVEL``: logging level name (default ``INFO``)

    Unset or empty variables fall back to the defaults; anything that does
    not parse raises :class:`InitializationError`.
    """
    env = os.environ if environ is None else environ

    salt_length = _int_from_env(env, ENV_SALT_LENGTH, DEFAULT_SALT_LENGTH, 1, 1024)
    iterations = _int_from_env(env, ENV_ITERATIONS, DEFAULT_ITERATIONS, 1, MAX_ITERATIONS)

    hash_name = env.get(ENV_HASH_ALGORITHM)
    if hash_name:
        try:
            hash_algorithm = HashAlgorithm.resolve(hash_name)
        except KingUtilsError as exc:
            raise InitializationError(f"{ENV_HASH_ALGORITHM}: {exc}") from exc
    else:
        hash_algorithm = DEFAULT_HASH_ALGORITHM

    try:
        log_level = resolve_level(env.get(ENV_LOG_LEVEL) or "INFO")
    except ValueError as exc:
        raise InitializationError(f"{ENV_LOG_LEVEL}: {exc}") from exc

    settings = EnvelopeSettings(
        salt_length=salt_length,
        iterations=iterations,
        hash_algorithm=hash_algorithm,
    )
    return AppContext(settings=settings, log_level=log_level)
