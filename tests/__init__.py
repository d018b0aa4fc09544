"""RZL Utils test suite.

Folder taxonomy
- unit/      : Isolated, fast checks of a single module or function.
- property/  : Hypothesis property-based checks of algebraic laws.
- e2e/       : The ``rzl-utils`` command line, invoked through Click's runner.

General guidance
- Keep unit tests fast and deterministic; stub the environment with
  ``monkeypatch`` and the clock with an injected callable.
- Assert user-observable results, not internals.
"""
