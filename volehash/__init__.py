"""Binary extension field arithmetic and the VOLE and ZK universal hashes."""

__version__ = "0.1.0"
__all__ = ["fields", "universal_hashing", "utils"]