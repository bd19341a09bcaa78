"""Filesystem and renderer adapters."""
