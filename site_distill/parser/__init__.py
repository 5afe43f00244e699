"""Parsing, cleaning and Markdown conversion of fetched pages."""
