"""Infrastructure layer: YAML parsing/serialization and file access.

This layer depends on stdlib and ruamel.yaml.
It must never import from services, commands, or output.
"""
