import pytest
import requests

from aoc_solutions import inputs
from aoc_solutions.inputs import InputConfig, fetch_input, input_path, load_points, read_grid, read_lines


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error", response=self)


def test_config_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("AOC_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("AOC_SESSION", "abc")
    config = InputConfig()
    assert config.data_dir == tmp_path
    assert config.headers()["Cookie"] == "session=abc"
    assert config.url.format(year=2025, day=8).endswith("/2025/day/8/input")


def test_input_path_layout(tmp_path):
    config = InputConfig(data_dir=tmp_path)
    assert input_path(config, 8) == tmp_path / "2025" / "day08" / "input.txt"
    assert input_path(config, 8, use_example=True).name == "example.txt"
    assert input_path(config, 8, filename="other.txt").name == "other.txt"


def test_read_lines_drops_trailing_blank_lines(tmp_path):
    path = tmp_path / "lines.txt"
    path.write_text("ab\r\ncd\n\n\n", encoding="utf-8")
    assert read_lines(path) == ["ab", "cd"]
    assert read_grid(path) == [["a", "b"], ["c", "d"]]


def test_load_points_keeps_file_order(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("162,817,812\n57,618,57\n\n906,360,560\n", encoding="utf-8")
    points = load_points(path)
    assert points == [(162, 817, 812), (57, 618, 57), (906, 360, 560)]
    assert all(isinstance(value, int) for value in points[0])


def test_load_points_decimal_and_empty(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("0.5,1,2\n3,4,5\n", encoding="utf-8")
    assert load_points(path) == [(0.5, 1.0, 2.0), (3.0, 4.0, 5.0)]
    empty = tmp_path / "empty.txt"
    empty.write_text("", encoding="utf-8")
    assert load_points(empty) == []


def test_fetch_input_downloads_and_caches(monkeypatch, tmp_path):
    calls = []

    def fake_get(url, headers, timeout):
        calls.append((url, headers))
        return FakeResponse("1,2,3\n")

    monkeypatch.setattr(inputs.requests, "get", fake_get)
    config = InputConfig(data_dir=tmp_path, session="secret", url="https://example.test/{year}/{day}")

    path = fetch_input(8, config)
    assert path.read_text(encoding="utf-8") == "1,2,3\n"
    assert calls == [("https://example.test/2025/8", config.headers())]

    fetch_input(8, config)
    assert len(calls) == 1


def test_fetch_input_retries_timeouts(monkeypatch, tmp_path):
    responses = [requests.exceptions.Timeout("slow"), FakeResponse("ok\n")]

    def fake_get(url, headers, timeout):
        result = responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(inputs.requests, "get", fake_get)
    monkeypatch.setattr(inputs.time, "sleep", lambda seconds: None)
    config = InputConfig(data_dir=tmp_path, session="secret")
    assert fetch_input(3, config).read_text(encoding="utf-8") == "ok\n"


def test_fetch_input_gives_up_after_server_errors(monkeypatch, tmp_path):
    monkeypatch.setattr(inputs.requests, "get", lambda url, headers, timeout: FakeResponse(status_code=503))
    monkeypatch.setattr(inputs.time, "sleep", lambda seconds: None)
    config = InputConfig(data_dir=tmp_path, session="secret", max_retries=2)
    with pytest.raises(RuntimeError):
        fetch_input(3, config)


def test_fetch_input_does_not_retry_client_errors(monkeypatch, tmp_path):
    calls = []

    def fake_get(url, headers, timeout):
        calls.append(url)
        return FakeResponse(status_code=404)

    monkeypatch.setattr(inputs.requests, "get", fake_get)
    config = InputConfig(data_dir=tmp_path, session="secret")
    with pytest.raises(requests.exceptions.HTTPError):
        fetch_input(3, config)
    assert len(calls) == 1


def test_fetch_input_requires_session(monkeypatch, tmp_path):
    monkeypatch.delenv("AOC_SESSION", raising=False)
    with pytest.raises(ValueError):
        fetch_input(3, InputConfig(data_dir=tmp_path))
