import importlib
import pytest

@pytest.fixture(scope="session")
def sanitize():
    return importlib.import_module("bitview.sanitize")

@pytest.fixture(scope="session")
def validate():
    return importlib.import_module("bitview.validate")

@pytest.fixture(scope="session")
def codec():
    return importlib.import_module("bitview.codec")

@pytest.fixture(scope="session")
def presenter():
    return importlib.import_module("bitview.presenter")

@pytest.fixture(scope="session")
def widths():
    return importlib.import_module("bitview.widths")
