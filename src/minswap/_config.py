"""Runtime configuration for the minswap package.

Three settings are exposed, each resolved the same way (first match
wins):

    1. Programmatic override via the matching ``set_*`` function.
    2. An environment variable.
    3. A built-in default.

Settings:

* **Count dtype** (``MINSWAP_COUNT_DTYPE``, default ``"uint64"``) —
  the NumPy integer type whose maximum bounds the ``count_each_*``
  functions.  A count that would not fit raises ``OverflowError``.
* **Integrity checks** (``MINSWAP_INTEGRITY_CHECKS``, default off) —
  re-verify the running-maximum array of
  :class:`~minswap.partitions.LexicographicPartition` after every step.
* **Recursion ceiling** (``MINSWAP_MAX_RECURSION_LIMIT``, default
  ``50000``) — the highest interpreter recursion limit the enumeration
  engines may request for a large selected region.

Examples:
    Count with 32-bit results from the shell::

        export MINSWAP_COUNT_DTYPE=uint32

    Turn on integrity checks programmatically::

        import minswap
        minswap.set_integrity_checks(True)

    Re-enable default resolution::

        minswap.set_count_dtype("auto")
"""

from __future__ import annotations

import os

import numpy as np

_DEFAULT_COUNT_DTYPE = "uint64"
_DEFAULT_MAX_RECURSION_LIMIT = 50_000
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

# Sentinels indicating "no programmatic override has been set".
_count_dtype_override: str | None = None
_integrity_override: bool | None = None
_recursion_override: int | None = None


def _normalise_dtype(name: str) -> str:
    """Return the canonical NumPy name of an integer dtype.

    Raises:
        ValueError: If *name* is not a NumPy integer dtype.
    """
    try:
        dtype = np.dtype(name)
    except TypeError:
        raise ValueError(f"Unknown count dtype '{name}'.") from None
    if not np.issubdtype(dtype, np.integer):
        raise ValueError(
            f"Count dtype must be a NumPy integer type, got '{dtype.name}'."
        )
    return dtype.name


def get_count_dtype() -> np.dtype:
    """Return the active count dtype.

    Resolution order:
        1. Value set by :func:`set_count_dtype` (unless ``"auto"``).
        2. ``MINSWAP_COUNT_DTYPE`` environment variable.
        3. ``uint64``.

    Returns:
        A NumPy integer ``dtype``.
    """
    # 1. Programmatic override
    if _count_dtype_override is not None:
        return np.dtype(_count_dtype_override)

    # 2. Environment variable
    env = os.environ.get("MINSWAP_COUNT_DTYPE", "").strip().lower()
    if env and env != "auto":
        return np.dtype(_normalise_dtype(env))

    # 3. Default
    return np.dtype(_DEFAULT_COUNT_DTYPE)


def set_count_dtype(name: str) -> None:
    """Override the count dtype.

    Args:
        name: A NumPy integer dtype name such as ``"uint32"`` or
            ``"int64"`` (case-insensitive), or ``"auto"`` to restore
            the default resolution order.

    Raises:
        ValueError: If *name* is not a NumPy integer dtype.
    """
    global _count_dtype_override
    normalised = name.strip().lower()
    if normalised == "auto":
        _count_dtype_override = None
        return
    _count_dtype_override = _normalise_dtype(normalised)


def get_integrity_checks() -> bool:
    """Return ``True`` if partition integrity checks are enabled."""
    if _integrity_override is not None:
        return _integrity_override

    env = os.environ.get("MINSWAP_INTEGRITY_CHECKS", "").strip().lower()
    return env in _TRUTHY


def set_integrity_checks(enabled: bool | str) -> None:
    """Enable or disable partition integrity checks.

    Args:
        enabled: ``True``/``False``, one of the strings
            ``"on"``/``"off"`` (and the usual synonyms), or ``"auto"``
            to fall back to the environment variable.

    Raises:
        ValueError: If *enabled* is an unrecognised string.
    """
    global _integrity_override
    if isinstance(enabled, bool):
        _integrity_override = enabled
        return
    normalised = enabled.strip().lower()
    if normalised == "auto":
        _integrity_override = None
    elif normalised in _TRUTHY:
        _integrity_override = True
    elif normalised in _FALSY:
        _integrity_override = False
    else:
        raise ValueError(
            f"Unknown integrity-check setting '{enabled}'. "
            f"Choose from: {sorted(_TRUTHY | _FALSY | {'auto'})}"
        )


def get_max_recursion_limit() -> int:
    """Return the highest recursion limit the engines may request.

    Resolution order:
        1. Value set by :func:`set_max_recursion_limit`.
        2. ``MINSWAP_MAX_RECURSION_LIMIT`` environment variable.
        3. ``50000``.
    """
    if _recursion_override is not None:
        return _recursion_override

    env = os.environ.get("MINSWAP_MAX_RECURSION_LIMIT", "").strip()
    if env.isdigit() and int(env) > 0:
        return int(env)

    return _DEFAULT_MAX_RECURSION_LIMIT


def set_max_recursion_limit(limit: int | str) -> None:
    """Override the recursion ceiling.

    Args:
        limit: A positive integer, or ``"auto"`` to restore the default
            resolution order.

    Raises:
        ValueError: If *limit* is not a positive integer or ``"auto"``.
    """
    global _recursion_override
    if isinstance(limit, str):
        if limit.strip().lower() != "auto":
            raise ValueError(
                f"Recursion limit must be a positive integer or 'auto', "
                f"got '{limit}'."
            )
        _recursion_override = None
        return
    if limit <= 0:
        raise ValueError(f"Recursion limit must be positive, got {limit}.")
    _recursion_override = int(limit)
