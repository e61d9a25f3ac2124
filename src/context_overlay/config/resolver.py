"""Candidate fragment path resolution along a context chain."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Sequence

from ..constants import DEFAULT_FRAGMENT_SUFFIX

# Anything outside [A-Za-z0-9_-/] is dropped from context names
_UNSAFE_CONTEXT_CHARS = re.compile(r"[^-_a-zA-Z0-9/]")


def sanitize_context_name(context: str) -> str:
    """
    Strip every character outside ``[A-Za-z0-9_-/]`` from a context name.

    Dots never survive, so a sanitized name cannot climb directories.

    Examples:
        >>> sanitize_context_name("Production/Live; rm -rf ..")
        'Production/Liverm-rf'
    """
    return _UNSAFE_CONTEXT_CHARS.sub("", context)


def context_fragment_path(prefix: str | Path, context: str, suffix: str = DEFAULT_FRAGMENT_SUFFIX) -> Path:
    """Build ``<prefix>/<sanitized context><suffix>``."""
    # String join keeps a leading "/" in the context from making the path absolute
    return Path(f"{prefix}/{sanitize_context_name(context)}{suffix}")


def resolve_context_paths(
    context_chain: Sequence[str],
    context_paths: Sequence[str | Path],
    suffix: str = DEFAULT_FRAGMENT_SUFFIX,
) -> List[Path]:
    """
    Expand every registered prefix with every context of the chain.

    Prefix order is the outer loop, chain order (general to specific) the
    inner one. Candidates are emitted whether or not they exist.
    """
    return [
        context_fragment_path(prefix, context, suffix)
        for prefix in context_paths
        for context in context_chain
    ]


def resolve_candidates(
    context_chain: Sequence[str],
    context_paths: Sequence[str | Path],
    plain_paths: Sequence[str | Path],
    suffix: str = DEFAULT_FRAGMENT_SUFFIX,
) -> List[Path]:
    """
    Produce the ordered list of fragment paths to attempt.

    All context-driven candidates come first, then the plain paths verbatim
    in registration order. Later entries win on merge conflicts.

    Examples:
        >>> [str(p) for p in resolve_candidates(["A", "A/B"], ["conf"], ["local.yaml"])]
        ['conf/A.yaml', 'conf/A/B.yaml', 'local.yaml']
    """
    candidates = resolve_context_paths(context_chain, context_paths, suffix)
    candidates.extend(Path(path) for path in plain_paths)
    return candidates
