"""Shared CLI library code."""
