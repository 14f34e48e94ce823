"""Bundled data files for promptbuilder."""
