"""Composition root: settings and adapter/use-case wiring."""
