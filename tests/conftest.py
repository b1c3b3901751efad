import os
import sys

import numpy as np
import pytest

# Get the path to the project root (one level up from 'tests')
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
src_path = os.path.join(project_root, 'src')

# Add 'src' to sys.path
sys.path.insert(0, src_path)

from quatrate.quaternion import Quaternion  # noqa: E402


@pytest.fixture
def quarter_turn_x():
    """90 deg about X."""
    s = np.sin(np.pi / 4)
    return Quaternion(s, 0.0, 0.0, np.cos(np.pi / 4))


@pytest.fixture
def quarter_turn_y():
    """90 deg about Y."""
    s = np.sin(np.pi / 4)
    return Quaternion(0.0, s, 0.0, np.cos(np.pi / 4))


@pytest.fixture
def eighth_turn_z():
    """45 deg about Z: [0, 0, sin(pi/8), cos(pi/8)]."""
    return Quaternion(0.0, 0.0, np.sin(np.pi / 8), np.cos(np.pi / 8))
