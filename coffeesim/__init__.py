"""Simulated coffee machine: recipes, inventory, payment, brewing, maintenance, event log and a terminal front panel."""

__version__ = "0.1.0"