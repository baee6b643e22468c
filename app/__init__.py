"""Inquiry template engine and the API that exposes it."""
