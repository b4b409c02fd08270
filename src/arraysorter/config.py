"""Environment driven defaults for sorters."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .algorithms import SortAlgorithm


class SorterSettings(BaseSettings):
    """Defaults applied by :meth:`arraysorter.Sorter.from_settings`."""

    model_config = SettingsConfigDict(env_prefix="ARRAYSORTER_", env_file=".env", case_sensitive=False)

    default_algorithm: SortAlgorithm = Field(default=SortAlgorithm.INSERTION)

    @field_validator("default_algorithm", mode="before")
    @classmethod
    def _parse_algorithm(cls, value: Any) -> SortAlgorithm:
        return SortAlgorithm.parse(value)


def load_settings(**overrides: Any) -> SorterSettings:
    """Return settings initialised from environment, with keyword overrides applied."""

    return SorterSettings(**overrides)
