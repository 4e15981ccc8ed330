"""Shopfront fixture package."""
