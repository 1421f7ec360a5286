"""Renderers for log entries."""
