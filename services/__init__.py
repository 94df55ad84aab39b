"""
services/ - Business Logic Layer
=================================
Conversion rules, per-chat conversation state and the event dispatcher.
Nothing here talks to Telegram directly.
"""
