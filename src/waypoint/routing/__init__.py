"""Routing — route template compilation and single-route matching.

Templates are compiled once at setup time into immutable patterns that
can be shared freely across threads.
"""
