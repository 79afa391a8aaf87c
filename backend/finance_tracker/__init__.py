"""
Finance Tracker backend package.
"""
