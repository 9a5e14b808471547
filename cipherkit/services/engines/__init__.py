"""Cipher engines, one module per cipher, grouped by family."""
