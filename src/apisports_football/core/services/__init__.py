"""Pipeline stages: validation, encoding, request building, response decoding."""
