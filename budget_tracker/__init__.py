"""
Personal Budget Tracker - Source Package

A small single-user budget ledger for recording income and expense
transactions and reviewing where the money went.

DESIGN PRINCIPLES:
1. The ledger owns its transactions; nothing else mutates them
2. Input is parsed at the boundary, never trusted inside the ledger
3. Queries are total functions (an empty ledger is a valid answer)
4. Every user action is auditable
"""

__version__ = "1.0.0"
__author__ = "Personal Budget Tracker Team"
