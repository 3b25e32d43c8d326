"""Monetary domain package.

This package contains the `Money` value type together with its collaborators:
`Currency` metadata, the currency registry, rounding modes and the allocation
and unit-conversion helpers used by `Money`.
"""
