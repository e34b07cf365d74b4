from __future__ import annotations

import json
from pathlib import Path

from result import Err, Ok

from hippoo.services.manifest import read_dependencies


def _write(tmp_path: Path, payload: object) -> Path:
    p = tmp_path / "package.json"
    p.write_text(json.dumps(payload), encoding="utf-8")
    return p


class TestReadDependencies:
    def test_runtime_only(self, tmp_path: Path) -> None:
        p = _write(tmp_path, {"dependencies": {"react": "^18.2.0", "vue": "3"}, "devDependencies": {"jest": "29"}})
        result = read_dependencies(p)
        assert isinstance(result, Ok)
        assert result.unwrap() == ["react", "vue"]

    def test_include_dev(self, tmp_path: Path) -> None:
        p = _write(tmp_path, {"dependencies": {"react": "1"}, "devDependencies": {"jest": "29", "react": "1"}})
        assert read_dependencies(p, include_dev=True).unwrap() == ["react", "jest"]

    def test_missing_sections(self, tmp_path: Path) -> None:
        p = _write(tmp_path, {"name": "app"})
        assert read_dependencies(p, include_dev=True).unwrap() == []

    def test_missing_file(self, tmp_path: Path) -> None:
        result = read_dependencies(tmp_path / "package.json")
        assert isinstance(result, Err)
        assert "No package.json" in result.unwrap_err()

    def test_invalid_json(self, tmp_path: Path) -> None:
        p = tmp_path / "package.json"
        p.write_text("{not json", encoding="utf-8")
        result = read_dependencies(p)
        assert isinstance(result, Err)
        assert "failed reading" in result.unwrap_err().lower()

    def test_non_object(self, tmp_path: Path) -> None:
        result = read_dependencies(_write(tmp_path, ["react"]))
        assert isinstance(result, Err)

    def test_bad_section(self, tmp_path: Path) -> None:
        result = read_dependencies(_write(tmp_path, {"dependencies": ["react"]}))
        assert isinstance(result, Err)
        assert "dependencies" in result.unwrap_err()
