"""Pytest configuration file for setting up test environment."""

import sys
from pathlib import Path

# Add the repository root to Python path so tests can import credstore
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))
