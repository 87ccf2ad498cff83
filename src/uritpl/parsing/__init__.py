"""Parsing: recursive-descent compilation of URI template source text.

Templates are compiled once into an immutable tuple of terms which the
expansion engine walks in order.
"""
