"""pagehooks: pre-processing hooks for markdown content pipelines."""

from pagehooks.config import PageHooksConfig, load_config
from pagehooks.hooks import HOOKS, chain, html_pre, json_pre, nav_pre, summary_html_pre
from pagehooks.models import Committer, HookResult, LastModified, Payload, Resource

__version__ = "0.1.0"

__all__ = [
    "HOOKS",
    "Committer",
    "HookResult",
    "LastModified",
    "PageHooksConfig",
    "Payload",
    "Resource",
    "chain",
    "html_pre",
    "json_pre",
    "load_config",
    "nav_pre",
    "summary_html_pre",
]
