"""
Spendwise - Personal Finance Tracker Service

A FastAPI-based service for logging transactions, managing payment
methods and splitting credit-card purchases into monthly installments.
"""

__version__ = "0.1.0"
