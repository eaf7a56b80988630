"""
Web UI module.

Provides the Flask lookup page and JSON API for path queries.
"""
