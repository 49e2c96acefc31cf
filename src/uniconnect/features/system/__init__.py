"""System feature - health endpoints."""
