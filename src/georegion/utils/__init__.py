"""Shared utilities for georegion."""
