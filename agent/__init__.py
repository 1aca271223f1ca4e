"""Bandit agents choosing which server receives each request."""
