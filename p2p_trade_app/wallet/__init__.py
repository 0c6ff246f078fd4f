"""
Wallet collaborator module.

Read views over the wallet's address entries used by address resolution.
"""
