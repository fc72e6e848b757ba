import pytest

# three tight clusters of three points; the first pair across clusters is (2, 6)
CLUSTERS = [
    (0, 0, 0),
    (1, 0, 0),
    (2, 0, 0),
    (100, 0, 0),
    (101, 0, 0),
    (102, 0, 0),
    (5, 100, 0),
    (6, 100, 0),
    (7, 100, 0),
]


@pytest.fixture
def cluster_points():
    return list(CLUSTERS)


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "puzzles"


@pytest.fixture
def write_day(data_dir):
    def _write(day, text, filename="example.txt", year=2025):
        path = data_dir / str(year) / f"day{day:02d}" / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
