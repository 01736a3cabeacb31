from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Type, TypeVar, Any, Dict, Iterable
from pydantic import BaseModel, Field
from yaml import safe_load, YAMLError
from dotenv import load_dotenv, find_dotenv

from xml2rdf.vocab import DEFAULT_NAMESPACE

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class Xml2RdfConfig(BaseModel):
    namespace: str = Field(DEFAULT_NAMESPACE, description="Prefix for minted node identifiers")
    output_file: Optional[Path] = Field(None, description="N-Triples file to append to; stdout if unset")
    strict: bool = Field(False, description="Fail on malformed XML instead of skipping the document")
    log_level: str = Field("WARNING", description="Logging level")
    log_file: Optional[Path] = Field(None, description="Write log records to this file instead of stderr")


HOME_CONFIG_DIR = Path("~/.xml2rdf/").expanduser()


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r") as f:
        data = safe_load(f)
    return data or {}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge two dicts. Dicts merge recursively; for non-dicts (incl. lists),
    the override wins entirely.
    """
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


class ConfigLoader:
    """
    Layered config loader with deep merging.

    Load order (low → high priority):
      1) base:   ~/.xml2rdf/{name}.yaml (or .yml)
      2) cwd:    ./{name}.yaml (or .yml)
      3) file:   explicit `path` if provided
      4) env:    YAML content from env var {NAME}_CONFIG
      5) env:    one variable per field, {NAME}_{field}

    Later layers override earlier ones (deep merge).
    """
    def __init__(self, config_name: str = "xml2rdf", home_dir: Optional[Path] = None):
        self.config_name = config_name or "xml2rdf"
        self.home_dir = home_dir or HOME_CONFIG_DIR

    def _candidate_paths(self, path: Optional[str | Path]) -> Iterable[Path]:
        explicit = [Path(path)] if path else []
        base = [
            self.home_dir / f"{self.config_name}.yaml",
            self.home_dir / f"{self.config_name}.yml",
        ]
        cwd = [
            Path.cwd() / f"{self.config_name}.yaml",
            Path.cwd() / f"{self.config_name}.yml",
        ]
        return base + cwd + explicit

    def _load_dotenv(self) -> None:
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path:
            logger.debug("Loading .env from: %s", dotenv_path)
            load_dotenv(dotenv_path, override=False)
        named = Path.cwd() / f"{self.config_name}.env"
        if named.exists():
            logger.debug("Loading config-specific .env from: %s", named)
            load_dotenv(named, override=False)

    def _env_config(self, config_class: Type[T]) -> Dict[str, Any]:
        env_config: Dict[str, Any] = {}

        env_var_name = f"{self.config_name.upper()}_CONFIG"
        env_content = os.environ.get(env_var_name)
        if env_content:
            try:
                d = safe_load(env_content)
            except YAMLError as e:
                raise ValueError(f"Failed to parse {env_var_name}: {e}") from e
            if isinstance(d, dict):
                env_config = d

        env_prefix = f"{self.config_name.upper()}_"
        for field_name in config_class.model_fields.keys():
            for key in (env_prefix + field_name, env_prefix + field_name.upper()):
                if key in os.environ:
                    env_config[field_name] = os.environ[key]
                    break
        return env_config

    def load_config(self, config_class: Type[T] = Xml2RdfConfig, path: Optional[str | Path] = None) -> T:
        if path and not Path(path).exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        self._load_dotenv()

        merged: Dict[str, Any] = {}
        for p in self._candidate_paths(path):
            d = _read_yaml(p)
            if d:
                logger.debug("Loaded config layer %s", p)
                merged = _deep_merge(merged, d)

        env_config = self._env_config(config_class)
        if env_config:
            merged = _deep_merge(merged, env_config)

        return config_class(**merged)


def load_config(path: Optional[str | Path] = None) -> Xml2RdfConfig:
    """
    Load the configuration for xml2rdf.
    """
    return ConfigLoader("xml2rdf").load_config(Xml2RdfConfig, path)
