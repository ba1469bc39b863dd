"""CLI module for privateroom."""
