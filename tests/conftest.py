"""Shared pytest configuration for the memexplorer test suite."""


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: walks large object graphs; excluded by run_tests.py by default"
    )
