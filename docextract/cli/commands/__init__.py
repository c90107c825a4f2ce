# docextract/cli/commands/__init__.py
