"""Normalized catalog output layer.

This module renders catalog models into ordered JSON documents
and persists them to disk.
"""
