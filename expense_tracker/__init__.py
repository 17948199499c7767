"""
Expense Tracker - Source Package

A single-user, in-memory expense tracker: record expenses, then look at
monthly totals, category breakdowns, a weekly trend and short insights.

DESIGN PRINCIPLES:
1. The store is the only writer; everything else reads snapshots
2. Reject bad input loudly, never store garbage
3. Aggregates are recomputed on demand, never cached
4. Every mutation is audited
5. The UI owns presentation state, the engine owns none
"""

__version__ = "1.0.0"
__author__ = "Expense Tracker Team"
