# flacparse/format_handlers/flac/__init__.py
# !/usr/bin/env python3

"""FLAC metadata block scanning and Vorbis comment decoding."""
