"""pgnify — convert unspaced lichess move transcripts to PGN."""

__version__ = "1.3.0"
