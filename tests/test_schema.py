"""
Tests for the plan shape guard and the plan loader.
"""
import io
import json

import pytest

from plancheck.plan.schema import is_plan, shape_errors
from plancheck.plan.loader import load_plan, parse_plan, PlanFormatError


class TestIsPlan:

    def test_valid(self):
        assert is_plan({"a": {"x": 1, "y": 2.5, "data": "zz"}})

    def test_empty_mapping(self):
        assert is_plan({})

    def test_extra_keys_allowed(self):
        assert is_plan({"a": {"x": 0, "y": 0, "data": "0", "color": "red"}})

    @pytest.mark.parametrize("task", [
        {"x": "0", "y": 0, "data": "0"},
        {"x": 0, "y": None, "data": "0"},
        {"x": 0, "y": 0, "data": 0},
        {"x": 0, "y": 0},
        {"x": True, "y": 0, "data": "0"},
        None,
        "0",
        [0, 0, "0"],
    ])
    def test_invalid_task(self, task):
        assert not is_plan({"ok": {"x": 0, "y": 0, "data": "0"}, "bad": task})

    @pytest.mark.parametrize("obj", [None, [], "plan", 3])
    def test_not_a_mapping(self, obj):
        assert not is_plan(obj)

    def test_shape_errors_name_the_task(self):
        errors = shape_errors({"good": {"x": 0, "y": 0, "data": "0"}, "bad": {"x": 0, "y": 0}})
        assert len(errors) == 1
        assert errors[0].startswith("bad: ")
        assert "'data'" in errors[0]

    def test_no_shape_errors_for_plan(self):
        assert shape_errors({"a": {"x": 0, "y": 0, "data": "0"}}) == []


class TestLoader:

    def test_parse(self):
        assert parse_plan('{"a": {"x": 1, "y": 2, "data": "0"}}') == {"a": {"x": 1, "y": 2, "data": "0"}}

    def test_bad_json(self):
        with pytest.raises(PlanFormatError) as exc:
            parse_plan("{not json")
        assert "invalid JSON" in str(exc.value)

    def test_wrong_shape(self):
        with pytest.raises(PlanFormatError) as exc:
            parse_plan(json.dumps({"a": {"x": "1", "y": 2, "data": "0"}}))
        assert str(exc.value).startswith("not a plan: a/x")

    def test_load_file(self, tmp_path):
        path = tmp_path / "plan.json"
        path.write_text(json.dumps({"a": {"x": 0, "y": 0, "data": "0\n1"}}), encoding="utf-8")
        assert load_plan(str(path))["a"]["data"] == "0\n1"

    def test_load_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO('{"a": {"x": 0, "y": 0, "data": "0"}}'))
        assert list(load_plan("-")) == ["a"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_plan(str(tmp_path / "missing.json"))
