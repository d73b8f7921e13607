"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from processing.performance.models import ResultRow


PASS = "Sağlıyor"
FAIL = "Sağlamıyor"


def make_row(
    story="Kat 1",
    earthquake="DD-2",
    combination="G+Q+Dx+",
    sh=PASS,
    kh=PASS,
    go=PASS,
    **statistics,
) -> ResultRow:
    """Build a ResultRow from source-column style values."""
    record = {
        "Bina_kat": story,
        "Bina_analiz_deprem": earthquake,
        "Bina_yuk_kombinasyon": combination,
        "Bina_SH": sh,
        "Bina_KH": kh,
        "Bina_GO": go,
    }
    for name, value in statistics.items():
        record[f"Bina_{name}"] = value
    return ResultRow.from_record(record)


# ---------------------------------------------------------------------------
# Result row fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def row_factory():
    return make_row


@pytest.fixture
def example_rows() -> list[ResultRow]:
    """Two stories under DD-2 in X, with one failing SH row on Kat 1."""
    return [
        make_row(story="Kat 1", combination="Dx+", sh=PASS, max_x_drift=0.003),
        make_row(story="Kat 1", combination="Dx-", sh=FAIL, max_x_drift=0.006),
        make_row(story="Bodrum", combination="Dx+", sh=PASS, max_x_drift=0.001),
    ]


@pytest.fixture
def mixed_rows() -> list[ResultRow]:
    """Rows across earthquake levels and both directions."""
    return [
        make_row(story="Zemin", earthquake="DD-1", combination="G+Q+0.3Dx+", max_x_drift=0.001, max_y_drift=0.002,
                 avg_x_drift=0.0008, avg_y_drift=0.0015, max_n_n0=0.31, avg_n_n0=0.22),
        make_row(story="Zemin", earthquake="DD-2", combination="G+Q+Dy-", kh=FAIL, max_x_drift=0.002,
                 max_y_drift=0.004, avg_x_drift=0.0012, avg_y_drift=0.003, max_n_n0=0.35, avg_n_n0=0.25),
        make_row(story="Kat 1", earthquake="DD-2", combination="G+Q+Dx-", max_x_drift=0.005, max_y_drift=0.001,
                 avg_x_drift=0.004, avg_y_drift=0.0009, max_n_n0=0.28, avg_n_n0=0.2),
        make_row(story="Kat 1", earthquake="DD-2", combination="G+Q+Dy+", go=FAIL, max_x_drift=0.001,
                 max_y_drift=0.006, avg_x_drift=0.0009, avg_y_drift=0.005, max_n_n0=0.3, avg_n_n0=0.21),
        make_row(story="Kat 2", earthquake="DD-3", combination="G+Q+Dx+", sh=FAIL, max_x_drift=0.007,
                 max_y_drift=0.002, avg_x_drift=0.006, avg_y_drift=0.0018, max_n_n0=0.4, avg_n_n0=0.3),
    ]
