"""Typed access to the ``[tour]`` configuration section."""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

DEFAULT_AUDIENCE = "Scala developer"


class TourConfigModel(BaseModel):
    """Pydantic model for [tour] config section validation.

    Example:
        >>> model = TourConfigModel(audience="Python developer")
        >>> model.audience
        'Python developer'
        >>> TourConfigModel().show_titles
        True
        >>> TourConfigModel(audience=42).audience
        '42'
    """

    audience: str = DEFAULT_AUDIENCE
    show_titles: bool = True

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)


def load_tour_settings(config: Config) -> TourConfigModel:
    """Parse the ``[tour]`` section of *config*.

    Args:
        config: Already-loaded layered configuration object.

    Returns:
        Validated settings; missing keys take their defaults.

    Raises:
        pydantic.ValidationError: If a configured value has the wrong type.

    Example:
        >>> from lib_layered_config import Config
        >>> load_tour_settings(Config({"tour": {"show_titles": False}}, {})).show_titles
        False
    """
    raw: object = config.get("tour", default={})
    return TourConfigModel.model_validate(dict(cast("Mapping[str, object]", raw)) if raw else {})


__all__ = [
    "DEFAULT_AUDIENCE",
    "TourConfigModel",
    "load_tour_settings",
]
