# Path: dto_link/process/__init__.py
"""PROCESS layer: DTO decoding."""
