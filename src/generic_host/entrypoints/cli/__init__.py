"""The ``generic-host`` command-line interface."""
