"""Adapters connecting the register domain to HTTP, files and databases."""
