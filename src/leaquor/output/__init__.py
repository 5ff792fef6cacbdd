"""Result reporters — JSON, Rich terminal, and file writer."""
