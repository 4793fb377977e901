"""SortService and the ServiceResult contract it returns.

Wires the domain transformations to the YAML adapter and the filesystem;
knows nothing about Click or Rich.
"""
