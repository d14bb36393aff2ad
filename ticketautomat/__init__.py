"""Tram ticket machine parts: cash box, payment and change prompts, tickets and logs."""

__version__ = "0.1.0"

__all__ = ["errorlog", "menu", "money", "readers", "ticket"]