"""
Book Log - Source Package

A personal reading log: record finished books, tally pages, and keep
track of what is owed at $1 per 100 pages.

DESIGN PRINCIPLES:
1. One explicit Ledger object, no hidden global state
2. Every change is saved before control returns to the menu
3. Bad input is re-prompted, never fatal
4. Storage layer is swappable
"""

__version__ = "1.0.0"
