"""Root conftest: registers test markers (its location also puts the root packages on sys.path)."""


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast, isolated tests")
    config.addinivalue_line("markers", "integration: end-to-end runs through several layers")
