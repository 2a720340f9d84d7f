"""
Storefront order handling: validation, message formatting and the relay flow.
"""
