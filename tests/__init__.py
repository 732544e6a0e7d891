"""INTERACTOR test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows tested at the CLI boundary.
- e2e/          : Full CLI runs checking what the console log tells the user.
- helpers/      : Shared fakes and sample pipelines (no tests here).

General guidance
- Keep unit fast and deterministic; prefer the recording fakes in
  helpers/steps.py over mocks.
- Functional asserts user-observable results, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
