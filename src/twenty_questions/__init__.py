"""
Twenty Questions - A decision-tree engine for "guess the character" games.

This package builds a binary question tree over a fixed set of characters
and walks it one yes/no answer at a time:
- Tree builder: greedily picks the question that splits the candidates most evenly
- Game session: tracks the current question and the characters still in play
- Game coordinator: plays a session against a presentation layer (the CLI)

Question and character records are loaded from CSV files.
"""

__version__ = "1.0.0"
