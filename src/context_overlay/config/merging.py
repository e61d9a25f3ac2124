"""Shared configuration merging utilities."""

import copy
from typing import Any, Dict, Mapping, MutableMapping


def merge_configs_with_precedence(
    base: Mapping[str, Any],
    overrides: Mapping[str, Any],
) -> Dict[str, Any]:
    """
    Merge config dictionaries with precedence rules.

    This function performs a deep merge where override values take precedence
    over base values. Nested dictionaries are merged recursively; any other
    value (scalars, ``None`` and lists alike) replaces the base value
    wholesale. Keys only present in ``base`` are kept.

    Args:
        base: Base configuration dictionary (not modified)
        overrides: Override configuration dictionary (not modified)

    Returns:
        Merged configuration dictionary

    Examples:
        >>> merge_configs_with_precedence({"a": {"p": 1, "q": 2}}, {"a": {"q": 9}})
        {'a': {'p': 1, 'q': 9}}
        >>> merge_configs_with_precedence({"list": [1, 2]}, {"list": [9]})
        {'list': [9]}
    """
    result = copy.deepcopy(dict(base))
    return apply_contribution(result, copy.deepcopy(dict(overrides)))


def apply_contribution(
    conf_vars: MutableMapping[str, Any],
    contribution: Mapping[str, Any],
) -> MutableMapping[str, Any]:
    """
    Deep-merge ``contribution`` into ``conf_vars`` in place and return it.

    Nested mappings that already exist are updated in place, so references
    the caller holds to them (e.g. ``conf_vars["SYS"]``) stay current.
    """
    for key, value in contribution.items():
        current = conf_vars.get(key)
        if isinstance(current, MutableMapping) and isinstance(value, Mapping):
            # Recursively merge nested dictionaries
            apply_contribution(current, value)
        else:
            conf_vars[key] = value

    return conf_vars
