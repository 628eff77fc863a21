"""Feed Service Setup (config, logging, database, DI)."""
