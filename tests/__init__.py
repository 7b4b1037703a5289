"""token_operator test suite.

Folder taxonomy
- unit/        : Isolated, fast checks of a single module/class/function.
- functional/  : Keyword-option APIs built on the public surface, end-to-end.

General guidance
- No I/O anywhere; tokens are plain values or small frozen dataclasses.
- Functional asserts the token a caller gets back, not dispatcher internals.
- Property-based tests live with the module they exercise and use @pytest.mark.property.
- Markers: unit, functional, property (registered in pyproject.toml).
"""
