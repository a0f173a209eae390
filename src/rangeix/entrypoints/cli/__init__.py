"""The ``rangeix`` command line interface."""
