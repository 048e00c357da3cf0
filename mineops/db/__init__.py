"""Database engine and session handling."""
