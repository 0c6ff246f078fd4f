"""
Localization module.

String table lookup with positional templates and currency classification.
"""
