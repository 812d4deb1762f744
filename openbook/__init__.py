"""openbook: compile LilyPond song files into a single transposed songbook."""

__version__ = "0.1.0"
