"""Context propagation for structured logging.

Fields bound here are copied onto every log record emitted within the
scope (see ContextualFilter), so one match computation can be traced
through the normalizer, extractors, matcher and scorer by its ``match_id``.
"""

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Any, Dict, Iterator

_fields: ContextVar[Dict[str, Any]] = ContextVar("resume_match_log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields bound in the current context."""
    return dict(_fields.get())


def push_log_context(**fields: Any) -> Token:
    """Bind fields on top of the current ones; returns a token for pop_log_context()."""
    return _fields.set({**_fields.get(), **fields})


def pop_log_context(token: Token) -> None:
    _fields.reset(token)


def clear_log_context() -> None:
    _fields.set({})


@contextmanager
def log_context(**fields: Any) -> Iterator[Dict[str, Any]]:
    """Bind fields for the duration of a ``with`` block.

    Example:
        >>> with log_context(match_id=new_match_id()):
        ...     logger.info("Scoring")  # record carries match_id
    """
    token = push_log_context(**fields)
    try:
        yield get_log_context()
    finally:
        pop_log_context(token)


def new_match_id() -> str:
    """Short random identifier correlating the log lines of one match."""
    return uuid.uuid4().hex[:12]
