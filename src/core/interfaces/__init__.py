"""Core interfaces/abstractions.

Why:
- Defines the contracts (Protocol) the concrete adapters implement.
- Inverts dependencies: the validator depends on abstractions, tests on fakes.
"""
