"""Helpers shared by the ``treelist`` command line."""
