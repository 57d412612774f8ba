"""Edwards curve fields, groups and Tate/ate pairings over a 183-bit prime field."""

__version__ = "0.1.0"
__all__ = ["fields", "g1", "g2", "tate", "ate", "pp"]