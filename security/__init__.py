"""
security/ - Access Control
==========================
Decorators wrapping every handler: user whitelist and per-user rate limiting.
"""
