import os
import pytest

# Set environment variables BEFORE any imports
os.environ['TIMEDIFF_LOCALE'] = 'en_US.UTF-8'
os.environ['TIMEDIFF_BASE_UNIT'] = 'seconds'
os.environ['TIMEZONE'] = 'UTC'


@pytest.fixture
def table():
    """Fresh resource table loaded with the built-in resources"""
    from timediff.i18n import BUILTIN_RESOURCES, ResourceTable
    return ResourceTable(BUILTIN_RESOURCES)
