import os
import sys
from pathlib import Path

import pytest

# The modules live at the project root
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Qt widgets in tests render without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def make_file(tmp_path):
    """Writes bytes to a fresh file and returns its path as a string."""
    def _make(content, name="test_file.bin"):
        file_path = tmp_path / name
        file_path.write_bytes(content)
        return str(file_path)
    return _make


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
