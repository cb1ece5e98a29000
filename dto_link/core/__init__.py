# Path: dto_link/core/__init__.py
"""Core infrastructure for dto_link (logging)."""
