"""Place discovery API package.

Ensures the local ``discovery`` package is resolved as a regular package
instead of a namespace package.
"""
