"""
Data models module.

Immutable trade, contract, offer and wallet address entry structures.
"""
