"""Adapters: HTTP transport and concrete API endpoints."""
