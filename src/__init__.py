"""Simplified DES (S-DES): key schedule, Feistel rounds and key-space tooling."""

__version__ = "0.1.0"
