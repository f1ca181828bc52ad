"""Core interfaces.

Why:
- Define contracts (Protocol) implemented by concrete adapters.
- The core depends on abstractions, not on a particular HTTP library setup.
"""
