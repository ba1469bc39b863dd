"""Utility modules for privateroom."""
