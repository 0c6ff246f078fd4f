"""
Trade utilities module.

Address resolution, trade period tracking, role labels and market
descriptions for active trades.
"""
