# -*- coding: utf-8 -*-
"""
Auxiliary services for the peperone CLI.

For now this only holds the logging setup shared by every command.
"""

__all__ = ["logging"]
