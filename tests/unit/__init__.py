"""Unit tests.

Purpose
- Verify one module of token_operator in isolation.

Guidelines
- Handlers are small local functions or lambdas; no mocks of the dispatcher.
- Prefer behavior-centric assertions over implementation details.
"""
