import sys
from pathlib import Path

import numpy as np
import pytest

SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture()
def rng():
    """Seeded generator so random cases are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture()
def no_show(monkeypatch):
    """Keep plotly from opening a browser; records shown figures."""
    import plotly.graph_objects as go

    shown = []
    monkeypatch.setattr(go.Figure, "show", lambda self, *a, **k: shown.append(self))
    return shown
