"""Adapter package for external service implementations.

Purpose:
    Concrete implementations of the domain ports: an in-memory commerce
    catalog for offline use and tests, and a ``requests`` based client for a
    remote fulfillment pricing service.

Call context:
    Wired by ``onepage.app.controller.AppController``; imported directly by
    tests for transport-level behavior checks.
"""
