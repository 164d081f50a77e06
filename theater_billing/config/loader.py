"""
Configuration management and loading.

Builds a PricingConfig from a YAML file. Omitted genres and fields keep
their defaults; anything unrecognised is rejected.
"""

import logging
from dataclasses import fields
from pathlib import Path
from typing import Dict

import yaml

from theater_billing.core.pricing import (
    GENRE_STRATEGIES,
    GenrePricing,
    PricingConfig,
    default_genres,
)

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "THEATER_BILLING_CONFIG"


def load_pricing_config(path: str) -> PricingConfig:
    """Load and validate pricing configuration from a YAML file.

    Strict validation ensures a typo in a rate name cannot silently leave
    the default in place.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated PricingConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
        ValueError: If configuration is invalid
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Pricing config file not found: {path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML in config file {path}: {e}")

    if not raw_config:
        raise ValueError("Configuration file is empty")
    if not isinstance(raw_config, dict):
        raise ValueError("Configuration must be a dictionary")

    allowed_top_keys = {'credits', 'genres'}
    unknown_keys = set(raw_config.keys()) - allowed_top_keys
    if unknown_keys:
        raise ValueError(f"Unknown configuration keys: {unknown_keys}")

    # Parse credits
    credits_data = raw_config.get('credits') or {}
    if not isinstance(credits_data, dict):
        raise ValueError("'credits' must be a dictionary")

    unknown_credit_keys = set(credits_data.keys()) - {'base_threshold'}
    if unknown_credit_keys:
        raise ValueError(f"Unknown credits keys: {unknown_credit_keys}")

    base_threshold = credits_data.get('base_threshold', PricingConfig.base_credit_threshold)

    # Parse genres, starting from the defaults
    genres_data = raw_config.get('genres') or {}
    if not isinstance(genres_data, dict):
        raise ValueError("'genres' must be a dictionary")

    genres = default_genres()
    for genre_name, genre_data in genres_data.items():
        if genre_data is None:
            genre_data = {}
        if not isinstance(genre_data, dict):
            raise ValueError(f"Genre '{genre_name}' must be a dictionary")
        genres[genre_name] = _parse_genre_config(genre_name, genre_data)

    config = PricingConfig(genres=genres, base_credit_threshold=base_threshold)
    logger.debug("Loaded pricing config from %s for genres %s", path, sorted(genres))
    return config


def _parse_genre_config(genre: str, data: Dict) -> GenrePricing:
    """Parse and validate the rates for one genre.

    Args:
        genre: Genre tag
        data: Rate overrides for the genre

    Returns:
        Pricing strategy for the genre

    Raises:
        ValueError: If the genre has no strategy or a rate is invalid
    """
    if genre not in GENRE_STRATEGIES:
        valid_genres = sorted(GENRE_STRATEGIES)
        raise ValueError(f"Unknown genre 'genres.{genre}', must be one of: {valid_genres}")

    strategy = GENRE_STRATEGIES[genre]
    allowed_keys = {f.name for f in fields(strategy)}
    unknown_keys = set(data.keys()) - allowed_keys
    if unknown_keys:
        raise ValueError(f"Unknown keys in genres.{genre}: {unknown_keys}")

    try:
        return strategy(**data)
    except ValueError as e:
        raise ValueError(f"Invalid rate in genres.{genre}: {e}")
