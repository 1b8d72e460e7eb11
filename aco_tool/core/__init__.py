"""aco_tool.core — Foundation layer.

Contains the palette types, the ACO decoder, and the text/JSON formatters.
This module has NO dependencies on aco_tool.writers or aco_tool.registry.
Only stdlib and numpy are allowed here.
"""
