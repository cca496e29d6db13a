"""
Pytest configuration for trace checker tests.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so absolute imports work
# (tests/ is inside the repository root)
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def trace_files(tmp_path):
    """Paths for a witness/constants file pair inside tmp_path."""
    return tmp_path / "commits.bin", tmp_path / "constants.bin"
