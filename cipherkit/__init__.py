"""Classical cipher transforms and brute-force cryptanalysis."""

__version__ = "0.1.0"
