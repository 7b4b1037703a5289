"""Functional tests.

Purpose
- Validate behavior at the package boundary, the way an application
  exposing keyword options would use it.

Guidelines
- Import only from ``token_operator`` itself.
- One flow/concern per test; assert on the returned token.
"""
