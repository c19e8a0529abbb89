"""Customer records and the read-only directory they are served from.

Customers are loaded once at startup from ``config/customers.yaml`` (or
the file named by ``CUSTOMERS_PATH``) and never modified afterwards.
"""
