"""Reconcile quoted file references in a spreadsheet against files on disk."""

__version__ = "0.1.0"
