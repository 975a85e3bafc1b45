# flacparse/format_handlers/__init__.py
# !/usr/bin/env python3

"""
This package contains modules for reading tags from container formats.
Each subpackage (e.g., flac) handles the parsing logic for a specific format.
"""
