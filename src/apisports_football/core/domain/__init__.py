"""Domain models.

Why:
- Pure, strict data shapes (Pydantic v2): query parameters, the response
  envelope and the per-resource records.
- The domain knows nothing about HTTP clients or the CLI.
"""
