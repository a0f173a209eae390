"""Entrypoints (inbound adapters) for rangeix.

Expose the library to the outside world through the ``rangeix`` command line.
Parse and validate inputs, call `Ix` instances, and present results.
"""
