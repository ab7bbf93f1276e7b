"""
Search tools for bsearch.

This module contains the boundary search functions and the configured searcher.
"""
