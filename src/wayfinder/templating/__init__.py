"""Templating — kida helpers for generating navigation links."""
