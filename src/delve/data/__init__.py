"""Packaged default configuration and content catalogs."""
