"""Budgetly backend - Plaid proxy for the Budgetly iOS app."""

__version__ = "0.1.0"
