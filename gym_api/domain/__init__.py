"""Domain types, validation and query helpers (no storage or HTTP here)."""
