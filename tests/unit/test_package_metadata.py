import solid_city
from solid_city import _package


def test_version_is_single_sourced():
    assert solid_city.__version__ == _package.VERSION == _package.__version__


def test_package_name():
    assert solid_city.__package_name__ == "solid-city"


def test_unused_metadata_removed():
    assert not hasattr(_package, "PACKAGE_NAME_PYTHON")
    assert not hasattr(_package, "DESCRIPTION")
