"""Shared core models and runtime plumbing.

This module holds constants, errors, configuration, logging,
and the typed catalog models used by every other layer.
"""
