"""Use-case layer for the checkout page.

Each module coordinates domain objects and ports and leaves transport
I/O to the adapters behind them.
"""
