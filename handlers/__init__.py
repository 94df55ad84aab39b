"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. Each handler turns a Telegram update into a domain
event, hands it to ConversionBot, and performs the returned actions.
No conversion logic lives here.
"""
