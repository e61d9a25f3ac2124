"""
@meta
name: application_context
type: utility
domain: context
responsibility:
  - Parse hierarchical context names (Production/Live/Server1)
  - Expose parent walk and production/development/testing predicates
  - Build the general-to-specific context chain
inputs:
  - Context name string or APP_CONTEXT environment variable
outputs:
  - ApplicationContext instances
  - Context chain tuples
tags:
  - utility
  - context
lifecycle:
  status: active
"""

from __future__ import annotations

import os
from typing import Any, Optional, Tuple

from ..constants import (
    CONTEXT_ENV_VAR,
    DEFAULT_CONTEXT,
    DEVELOPMENT_CONTEXT,
    PRODUCTION_CONTEXT,
    ROOT_CONTEXTS,
    TESTING_CONTEXT,
)
from ..errors import ContextError


class ApplicationContext:
    """
    Hierarchical application context such as ``Production/Live/Server1``.

    The first segment is the root context and must be one of
    ``Production``, ``Development`` or ``Testing``. Every further segment
    narrows the context; ``parent`` drops the last one.
    """

    def __init__(self, name: str):
        name = (name or "").strip()
        if not name:
            raise ContextError("Application context name must not be empty")

        segments = name.split("/")
        if any(not segment for segment in segments):
            raise ContextError(f"Application context has an empty segment: {name!r}")
        if segments[0] not in ROOT_CONTEXTS:
            raise ContextError(
                f"Invalid root context {segments[0]!r} in {name!r}, "
                f"expected one of: {', '.join(ROOT_CONTEXTS)}"
            )

        self._segments = tuple(segments)

    @classmethod
    def from_environment(
        cls,
        var: str = CONTEXT_ENV_VAR,
        default: str = DEFAULT_CONTEXT,
    ) -> "ApplicationContext":
        """Build the context from an environment variable, falling back to ``default``."""
        return cls(os.environ.get(var) or default)

    @property
    def parent(self) -> Optional["ApplicationContext"]:
        if len(self._segments) == 1:
            return None
        return ApplicationContext("/".join(self._segments[:-1]))

    @property
    def root(self) -> str:
        return self._segments[0]

    @property
    def is_root(self) -> bool:
        return len(self._segments) == 1

    @property
    def is_production(self) -> bool:
        return self.root == PRODUCTION_CONTEXT

    @property
    def is_development(self) -> bool:
        return self.root == DEVELOPMENT_CONTEXT

    @property
    def is_testing(self) -> bool:
        return self.root == TESTING_CONTEXT

    def __str__(self) -> str:
        return "/".join(self._segments)

    def __repr__(self) -> str:
        return f"ApplicationContext({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApplicationContext):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)


def build_context_chain(context: Any) -> Tuple[str, ...]:
    """
    Walk a context up to its root and return the names, most general first.

    Any object exposing ``parent`` and ``__str__`` works, so host
    applications can pass their own context implementation.

    Examples:
        >>> build_context_chain(ApplicationContext("Production/Live/Server1"))
        ('Production', 'Production/Live', 'Production/Live/Server1')
    """
    names = []
    current = context
    while current is not None:
        names.append(str(current))
        current = current.parent

    # General first (e.g. Production), specific last (e.g. Server1)
    return tuple(reversed(names))
