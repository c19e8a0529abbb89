"""Delivery notification package.

Derives the "your next delivery" notification (title, message, total
price and free-gift flag) for a customer from their active subscriptions.
"""
