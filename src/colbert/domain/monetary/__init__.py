"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies,
including Currency definitions, the ISO 4217 currency table, and Money
arithmetic over integer minor units with banker's rounding.
"""
