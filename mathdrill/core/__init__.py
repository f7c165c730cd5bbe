"""Core mathematics for the drill sessions.

This package contains pure building blocks:

- ``questions``       — arithmetic question generators and the shared RNG factory
- ``kelly``           — Kelly criterion fraction, tolerance scoring, feedback bands
- ``practice_config`` — per-session stopping policy and parsing of user answers

Nothing in this package imports from ``mathdrill.services`` or touches
stdin/stdout.  All modules are side-effect-free and unit-testable in isolation.
"""
