"""Recruiting operations console backend."""
