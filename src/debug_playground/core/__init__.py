"""Core program logic - operations, entry sequence and errors."""
