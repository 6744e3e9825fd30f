"""Infrastructure adapters: database, repositories, settings, logging."""
