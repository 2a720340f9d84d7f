"""
Storefront order relay: validates order submissions and forwards them to Telegram.
"""
