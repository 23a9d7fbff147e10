"""Plugins bundled with slidegrid."""
