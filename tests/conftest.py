import os

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")


@pytest.fixture
def ai_text():
    return "AI is powerful. AI changes industries. AI raises ethical questions."


@pytest.fixture
def article():
    return (
        "Solar panels convert sunlight into electricity. "
        "Modern solar panels reach high efficiency in direct sunlight. "
        "Wind turbines produce electricity from moving air. "
        "Many countries combine solar panels and wind turbines to stabilize supply. "
        "Battery storage keeps electricity available after sunset. "
        "Grid operators balance supply and demand every second. "
        "Cheap battery storage makes solar electricity more useful at night."
    )
