"""
utils/ - Shared helpers
=======================
Logging setup used by every layer.
"""
