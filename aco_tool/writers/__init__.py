"""Output writers.

Each module here defines a `writer` object and is listed in
aco_tool.registry.WRITER_MODULES.
"""
