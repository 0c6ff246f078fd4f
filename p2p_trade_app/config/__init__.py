"""
Configuration module.

Default parameters, YAML-backed loader with layered precedence, and
validation of the merged settings.
"""
