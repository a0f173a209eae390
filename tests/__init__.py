"""rangeix test suite.

Folder taxonomy
- unit/      : Isolated, fast checks of a single module/class/function.
- contract/  : Invariants every `Ix` instance must uphold, parametrized over
               all instances (includes Hypothesis property tests).
- e2e/       : The ``rangeix`` command driven through Click's CliRunner.
- fixtures/  : Shared test data generation (no tests here).

General guidance
- Keep unit tests fast and deterministic.
- Contract tests parametrize instances to ensure consistent behavior.
- Property-based tests use @pytest.mark.property.
"""
