"""Crawl engine: frontier, scope, link discovery, fetching."""
