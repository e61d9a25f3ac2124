"""Generic shared utilities module.

This module contains domain-agnostic helpers (file formats, logging, CLI
argument groups) used by the loader and the command-line entry point.
"""
