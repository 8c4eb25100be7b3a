"""Routing — route templates, the startup route table, and template selection.

Templates are parsed once while the table is built and stay immutable
for the lifetime of the process.
"""
