"""HTTP service exposing the pool operations."""
