"""Pytest configuration for tests."""

import sys
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest
import yaml

# Add the project root to the path so we can import trend_percentages
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

from trend_percentages.models import Sample, TrendWindow


@pytest.fixture
def t0():
    """Whole-second reference time used as the window start."""
    return datetime(2024, 1, 1, 10, 0, 0)


@pytest.fixture
def make_sample(t0):
    """Build a Sample at an offset (in seconds) from t0."""
    def _make(offset_seconds: float, value: str) -> Sample:
        return Sample(t0 + timedelta(seconds=offset_seconds), value)
    return _make


@pytest.fixture
def ten_second_window(t0):
    """Window [t0, t0 + 10s]."""
    return TrendWindow(t0, t0 + timedelta(seconds=10))


@pytest.fixture
def hour_of_samples(t0):
    """An hour of irregular state changes, including blanks, starting before t0."""
    states = ["Running", "Stopped", "Fault", "", "Running", "Maintenance"]
    return [
        Sample(t0 + timedelta(seconds=-100 + i * 37.3), states[i % len(states)])
        for i in range(100)
    ]


@pytest.fixture
def trend_csv_file():
    """Create a temporary trend-record CSV file with a header row."""
    content = """timestamp,parameter,value
2024-01-01 09:59:50.000,1/2/3,A
2024-01-01 10:00:02.000,9/9/9,Other
2024-01-01 10:00:05.000,1/2/3,B
2024-01-01 10:00:20.000,1/2/3,C
"""
    with tempfile.NamedTemporaryFile(mode='w', delete=False, suffix='.csv') as f:
        f.write(content)
        temp_path = f.name

    yield temp_path

    # Cleanup
    Path(temp_path).unlink()


@pytest.fixture
def settings_yaml_file():
    """Create a temporary YAML settings file overriding a few values."""
    config = {
        "trend_settings": {"percentage_decimals": 1},
        "csv_source": {"columns": {"parameter": "param_id"}},
        "logging": {"level": "DEBUG"},
    }

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config, f)
        temp_path = f.name

    yield temp_path

    # Cleanup
    Path(temp_path).unlink()
