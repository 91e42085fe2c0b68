"""QuickSpellFix: fix the previous misspelled word and cycle through suggestions."""
__version__ = "0.1.0"
