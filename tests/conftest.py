import pytest

from config.calculator_config import set_config
from services.averaging import Position, Purchase


@pytest.fixture(autouse=True)
def reset_config():
    """Drop any cached configuration between tests."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def position():
    """100 shares held at an average of $10.00."""
    return Position(shares=100, average_cost=10.0)


@pytest.fixture
def purchase():
    return Purchase(price=8.0)


@pytest.fixture
def mock_streamlit(monkeypatch):
    """Patch the streamlit module used by the calculator page."""
    from unittest.mock import MagicMock

    import ui.calculator as page

    st = MagicMock()
    st.session_state = {}
    st.columns.side_effect = lambda n: [MagicMock() for _ in range(n)]
    st.form.return_value.__enter__.return_value = None
    st.form.return_value.__exit__.return_value = False
    monkeypatch.setattr(page, "st", st)
    return st
