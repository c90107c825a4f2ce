# docextract/logging/tags.py
"""
Logging subsystem tags.

Prefix log messages with these so output stays consistent and searchable.
"""

EXTRACT = "[EXTRACT]"
REGISTRY = "[REGISTRY]"
ENGINE = "[ENGINE]"
IMPORT = "[IMPORT]"
CLI = "[CLI]"
