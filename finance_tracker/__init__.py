"""
Finance Tracker - Personal Income & Expense Service

A FastAPI-based service for recording income and expense transactions
and serving the dashboard statistics derived from them.
"""

__version__ = "0.1.0"
