"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import PageHooksConfig

# Secrets that may come straight from the process environment.
SECRET_ENV_VARS = ("REPO_API_ROOT", "REPO_RAW_ROOT")


def config_candidates(cli_path: str | None = None) -> list[Path]:
    """Files consulted, highest priority first: CLI, project-local, user-global."""
    candidates = [Path("pagehooks.yaml"), Path.home() / ".pagehooks" / "config.yaml"]
    if cli_path:
        candidates.insert(0, Path(cli_path))
    return candidates


def load_config(cli_path: str | None = None) -> PageHooksConfig:
    """Load the first non-empty config file, or defaults when there is none.

    Secrets left blank fall back to the REPO_API_ROOT / REPO_RAW_ROOT
    environment variables.
    """
    raw: object = {}
    source = "defaults"
    for path in config_candidates(cli_path):
        if not path.exists():
            continue
        try:
            with open(path) as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        if loaded is not None:
            raw, source = _expand_env_vars(loaded), str(path)
            break

    if isinstance(raw, dict):
        raw["secrets"] = _fill_secrets_from_env(raw.get("secrets"))
    try:
        return PageHooksConfig.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid config in {source}: {e}") from e


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


def _fill_secrets_from_env(secrets: object) -> object:
    if secrets is None:
        secrets = {}
    if not isinstance(secrets, dict):
        return secrets
    for env_name in SECRET_ENV_VARS:
        if secrets.get(env_name) or secrets.get(env_name.lower()):
            continue
        if os.environ.get(env_name):
            secrets.pop(env_name.lower(), None)
            secrets[env_name] = os.environ[env_name]
    return secrets


# Default YAML template for `pagehooks config init`
DEFAULT_CONFIG_TEMPLATE = """\
# pagehooks.yaml

# Upstream endpoints. Leaving one unset skips the step that needs it.
secrets:
  REPO_API_ROOT: "${REPO_API_ROOT}"   # e.g. https://api.github.com/
  REPO_RAW_ROOT: "${REPO_RAW_ROOT}"   # e.g. https://raw.githubusercontent.com/

# HTTP client
http:
  timeout: 30
  user_agent: "pagehooks"

# Navigation
nav:
  enabled: true
  summary_path: "SUMMARY.md"

# Prefix for rewritten links in html_pre
context_path: "/"

# Last-modified display
last_modified_style: "relative"   # relative | absolute

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
