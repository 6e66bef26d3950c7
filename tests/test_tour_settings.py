"""``[tour]`` settings: defaults, values from config and validation."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config
from pydantic import ValidationError

from syntax_snippets.adapters.config.loader import get_config, get_default_config_path
from syntax_snippets.adapters.config.tour import DEFAULT_AUDIENCE, TourConfigModel, load_tour_settings


@pytest.mark.os_agnostic
def test_missing_section_yields_defaults(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Configuration without ``[tour]`` falls back to the defaults."""
    settings = load_tour_settings(config_factory({}))

    assert settings.audience == DEFAULT_AUDIENCE
    assert settings.show_titles is True


@pytest.mark.os_agnostic
def test_configured_values_are_used(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Present keys replace the defaults."""
    settings = load_tour_settings(config_factory({"tour": {"audience": "newcomer", "show_titles": False}}))

    assert settings == TourConfigModel(audience="newcomer", show_titles=False)


@pytest.mark.os_agnostic
def test_unknown_keys_are_ignored(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Extra keys in ``[tour]`` do not break loading."""
    settings = load_tour_settings(config_factory({"tour": {"colour": "blue"}}))

    assert settings.audience == DEFAULT_AUDIENCE


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "tour",
    [{"audience": ["a", "b"]}, {"show_titles": "maybe"}, {"show_titles": [True]}],
)
def test_wrongly_typed_values_are_rejected(
    config_factory: Callable[[dict[str, Any]], Config],
    tour: dict[str, Any],
) -> None:
    """Type mismatches surface as pydantic validation errors."""
    with pytest.raises(ValidationError):
        load_tour_settings(config_factory({"tour": tour}))


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("raw", "expected"), [(42, "42"), (2.5, "2.5")])
def test_numeric_audience_is_read_as_text(
    config_factory: Callable[[dict[str, Any]], Config],
    raw: float,
    expected: str,
) -> None:
    """Numbers from TOML or ``--set`` become the audience text."""
    assert load_tour_settings(config_factory({"tour": {"audience": raw}})).audience == expected


@pytest.mark.os_agnostic
def test_settings_are_frozen() -> None:
    """Loaded settings cannot be changed afterwards."""
    settings = TourConfigModel()

    with pytest.raises(ValidationError):
        settings.audience = "someone else"  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_bundled_defaults_declare_the_tour_section() -> None:
    """defaultconfig.toml ships with the documented ``[tour]`` keys."""
    text = get_default_config_path().read_text(encoding="utf-8")

    assert "[tour]" in text
    assert f'audience = "{DEFAULT_AUDIENCE}"' in text
    assert "show_titles = true" in text


@pytest.mark.os_agnostic
def test_layered_config_loads_bundled_tour_defaults(clear_config_cache: None) -> None:
    """The real loader reads the bundled defaults."""
    settings = load_tour_settings(get_config())

    assert isinstance(settings.audience, str)
    assert isinstance(settings.show_titles, bool)


@pytest.mark.os_agnostic
def test_config_loader_caches_results(clear_config_cache: None) -> None:
    """Repeated loads with the same arguments return the same object."""
    assert get_config() is get_config()


@pytest.mark.os_agnostic
def test_config_loader_rejects_path_like_profiles(clear_config_cache: None) -> None:
    """Profiles are names, not paths."""
    with pytest.raises(ValueError):
        get_config(profile="../../etc")
