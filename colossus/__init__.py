"""Workflow components, a shared heap with template substitution, and runnable nodes."""

__version__ = "0.2.0"