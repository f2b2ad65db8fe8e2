"""
Core calendar arithmetic and Jalali conversion adapters.

This module contains the foundational building blocks for Gregorian to
Jalali conversion. Everything here is pure computation with no I/O.
"""
