"""LangSmith tracing switches for question answering."""

import os
from functools import lru_cache
from typing import Any, Callable, Dict, TypeVar

from langsmith import traceable
from pydantic import SecretStr

from core.config import Settings, get_settings

FuncT = TypeVar("FuncT", bound=Callable[..., Any])

_ENV_FIELDS = (
    ("LANGSMITH_PROJECT", "langsmith_project"),
    ("LANGSMITH_ENDPOINT", "langsmith_endpoint"),
    ("LANGSMITH_API_KEY", "langsmith_api_key"),
)

TRACE_TAGS = ["contract-qa"]


def langsmith_env(settings: Settings) -> Dict[str, str]:
    """Environment variables LangSmith reads, derived from ``settings``."""
    env: Dict[str, str] = {}
    for name, field in _ENV_FIELDS:
        value = getattr(settings, field)
        if isinstance(value, SecretStr):
            value = value.get_secret_value()
        if value:
            env[name] = str(value)
    if settings.langsmith_tracing:
        env["LANGSMITH_TRACING"] = "true"
    return env


@lru_cache(maxsize=1)
def configure_langsmith_env() -> None:
    # values already exported in the shell win
    for name, value in langsmith_env(get_settings()).items():
        os.environ.setdefault(name, value)


def traceable_if_enabled(*decorator_args, **decorator_kwargs) -> Callable[[FuncT], FuncT]:
    """Return LangSmith's ``traceable`` when tracing is on, else a no-op."""
    configure_langsmith_env()
    if not get_settings().langsmith_tracing:
        return lambda func: func
    decorator_kwargs.setdefault("tags", TRACE_TAGS)
    return traceable(*decorator_args, **decorator_kwargs)  # type: ignore[return-value]


__all__ = ["configure_langsmith_env", "langsmith_env", "traceable_if_enabled"]
