"""Game logic for a falling-candy puzzle game: board, pieces, placement, scoring, preview, dialog text and preferences."""

__version__ = "3.0.2"