"""
models/ - Domain Layer
======================
Plain dataclasses and enums describing what flows between Telegram and the
conversion logic. No Telegram types are imported here.
"""
