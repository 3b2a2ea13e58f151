"""
Plan Billing Package

A small billing calculator for metered consumption.
Resolves a pricing plan from its category through a shared factory, then
bills the consumed units at that plan's rate.
"""

__version__ = "1.0.0"
