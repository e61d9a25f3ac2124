"""Application context identity and chain building."""

from .application_context import ApplicationContext, build_context_chain

__all__ = [
    "ApplicationContext",
    "build_context_chain",
]
