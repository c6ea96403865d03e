"""Pytest configuration for tests.

No sys.path hacks - tests import from the installed structbind package.
Schemas used across tests live in sample_schemas.py next to this file.
"""

import pytest

from structbind.kernel.context import default_context


@pytest.fixture(autouse=True)
def clean_default_context():
    """Diagnostics are process-wide; start and finish every test with an empty context."""
    default_context.clear()
    yield
    default_context.clear()
