"""Catalog ingestion pipeline.

This module reads raw catalog documents and reshapes them into
ordered, normalized catalog models for the store layer.
"""
