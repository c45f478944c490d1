# SPDX-License-Identifier: MIT
"""Settings loader for factlens.

Settings live in an optional YAML file (``factlens.yaml`` in the working
directory, or the path named by ``FACTLENS_CONFIG``) and are validated with
pydantic. A missing file means defaults.
"""

from __future__ import annotations

import functools
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import FactSettingsError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FACTLENS_CONFIG"
DEFAULT_CONFIG_PATH = Path("factlens.yaml")

# When running `Fact.satisfy`, repeat mutate+check this many times, in case
# repetition helps ease into the constraint.
DEFAULT_SATISFY_ATTEMPTS = 7
DEFAULT_BRUTE_ITERATION_LIMIT = 100
DEFAULT_NOISE_SIZE = 1_000_000


class FactSettings(BaseModel):
    """Tunable bounds and defaults.

    Attributes:
        satisfy_attempts: Mutate/check rounds tried by ``satisfy`` before giving up
        brute_iteration_limit: Resampling ceiling for brute-force facts
        noise_size: Default size in bytes of generated noise buffers
        noise_seed: Default seed for noise buffers (None = fresh entropy)
        max_collection_len: Upper bound on arbitrary list/tuple/dict/set lengths
        max_string_len: Upper bound on arbitrary str/bytes lengths
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    satisfy_attempts: int = Field(DEFAULT_SATISFY_ATTEMPTS, ge=1)
    brute_iteration_limit: int = Field(DEFAULT_BRUTE_ITERATION_LIMIT, ge=1)
    noise_size: int = Field(DEFAULT_NOISE_SIZE, ge=1)
    noise_seed: int | None = Field(None, ge=0)
    max_collection_len: int = Field(8, ge=0)
    max_string_len: int = Field(16, ge=0)


def resolve_config_path(config_path: Path | None = None) -> Path:
    if config_path is not None:
        return config_path
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def load_settings(config_path: Path | None = None) -> FactSettings:
    """Load settings from YAML.

    Args:
        config_path: Path to the YAML file. Defaults to ``$FACTLENS_CONFIG``
            or ``factlens.yaml`` in the working directory.

    Returns:
        Validated FactSettings. Defaults if the file does not exist.

    Raises:
        FactSettingsError: If the file is not valid YAML, not a mapping, or
            fails validation.
    """
    path = resolve_config_path(config_path)
    if not path.exists():
        return FactSettings()

    logger.debug("Loading factlens settings from %s", path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise FactSettingsError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return FactSettings()
    if not isinstance(data, dict):
        raise FactSettingsError(f"Config must be a mapping, got {type(data).__name__}")

    return parse_settings(data, source=path)


def parse_settings(data: dict[str, Any], *, source: Path | None = None) -> FactSettings:
    try:
        return FactSettings.model_validate(data)
    except ValidationError as e:
        where = f" in {source}" if source is not None else ""
        raise FactSettingsError(f"Invalid factlens settings{where}: {e}") from e


@functools.lru_cache(maxsize=1)
def get_settings() -> FactSettings:
    """Return the process settings, loading them on first use."""
    return load_settings()


def reset_settings() -> None:
    """Forget cached settings so the next :func:`get_settings` reloads them."""
    get_settings.cache_clear()
