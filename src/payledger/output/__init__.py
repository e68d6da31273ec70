"""Rendering of service results for terminals and machines."""
