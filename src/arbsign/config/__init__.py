"""Configuration layer — CLI settings, logging, and the opportunity config source."""
