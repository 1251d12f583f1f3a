"""Database session management."""
