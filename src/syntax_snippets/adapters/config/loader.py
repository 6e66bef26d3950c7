"""Read the layered configuration once per profile.

Layers, lowest precedence first: the bundled ``defaultconfig.toml``, then
app, host and user files, ``.env`` and environment variables. A profile
inserts ``profile/<name>/`` into every file path.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from syntax_snippets import __init__conf__

_DEFAULT_CONFIG = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are empty, too long or path-like.

    Raises:
        ValueError: If lib_layered_config refuses the name.

    Examples:
        >>> validate_profile("classroom")

        >>> validate_profile("../../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../../etc
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH if max_length is None else max_length)


def get_default_config_path() -> Path:
    """Location of the bundled defaults.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return _DEFAULT_CONFIG


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration for *profile*.

    Results are cached per ``(profile, start_dir)``; ``get_config.cache_clear()``
    forces the next call to read every layer again. Invalid profiles raise
    before anything is cached.

    Args:
        profile: Optional profile name (letters, digits, ``-`` and ``_``).
        start_dir: Where ``.env`` discovery starts; defaults to the working
            directory.

    Raises:
        ValueError: If ``profile`` is not a valid profile name.

    Example:
        >>> get_config().get("tour.audience")  # doctest: +SKIP
        'Scala developer'
    """
    if profile is not None:
        validate_profile(profile)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
