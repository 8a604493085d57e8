"""Infrastructure layer — adapters over external cryptographic libraries."""
