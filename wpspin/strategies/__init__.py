"""Vendor PIN derivation formulas."""
