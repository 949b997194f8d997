"""Utility modules for fuzzyrank."""
