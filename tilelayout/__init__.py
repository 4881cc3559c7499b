"""Crossword-style tile layouts from a word list."""
