"""Settings and logging configuration for the TTRPG name generator."""
