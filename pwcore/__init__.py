"""
pwcore Shared Module
====================

Configuration, logging, console, data models, and HTTP client shared by
the pwcheck password evaluator.
"""

from pwcore.config import PwConfig

__all__ = ["PwConfig"]
