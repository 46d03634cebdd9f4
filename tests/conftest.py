from io import StringIO

import pytest
from rich.console import Console


@pytest.fixture
def console():
    """A plain-text console whose output is read with `console.file.getvalue()`."""
    return Console(file=StringIO(), color_system=None, width=200)
