"""Developer tooling for exercising a functions framework echo app."""
