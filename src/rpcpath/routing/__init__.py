"""Routing — URL templates compiled into immutable variable extractors.

Templates are compiled once at startup and matched against every
incoming request URL.
"""
