"""Test suite package marker to ensure deterministic module names."""

# Package semantics let ``tests.helpers`` be imported from every test module,
# including those collected from nested directories such as ``tests/cli``.
