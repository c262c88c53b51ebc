"""Config loading with validation."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

from tt_predictor.engine.params import EngineParams

API_URL_ENV = "TT_API_URL"


def load_config(path: str = "configs/default.yaml") -> dict:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with open(p) as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a mapping: {path}")

    # Validate required keys
    for key in ("paths", "source", "engine"):
        if key not in cfg:
            raise ValueError(f"Missing config key: {key}")
    for key in ("paths", "source"):
        if not isinstance(cfg[key], dict):
            raise ValueError(f"Config key '{key}' must be a mapping")

    # .env / environment override the API URL
    load_dotenv()
    env_url = os.getenv(API_URL_ENV)
    if env_url is not None:
        cfg["source"]["api_url"] = env_url
    return cfg


def engine_params(cfg: dict) -> EngineParams:
    """EngineParams from the ``engine:`` section (ValueError on bad keys)."""
    return EngineParams.from_dict(cfg.get("engine"))
