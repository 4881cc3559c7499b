from .dictionary import DICTIONARY, load_dictionary

__all__ = ["DICTIONARY", "load_dictionary"]
