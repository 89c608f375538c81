import json

import pytest
import tag_hunter
from compliance.errors import EvaluationError
from compliance.rule_config import RuleConfig


def _write_plan(tmp_path, changes):
    path = tmp_path / "plan.json"
    path.write_text(json.dumps({"format_version": "1.2", "resource_changes": changes}))
    return path


def _change(name, after, after_unknown=None, rtype="azurerm_resource_group"):
    return {
        "address": f"{rtype}.{name}",
        "mode": "managed",
        "type": rtype,
        "name": name,
        "change": {"actions": ["create"], "after": after, "after_unknown": after_unknown or {}},
    }


class TestRun:

    def test_compliant_plan(self, tmp_path):
        path = _write_plan(tmp_path, [_change("rg", {"tags": {"Foo": "1", "Bar": "2"}})])

        result = tag_hunter.run(path, RuleConfig(tags=("Foo", "Bar")))

        assert result["status"] == "ok"
        assert result["resources"] == 1
        assert result["issues"] == []
        assert "- None detected" in result["report"]

    def test_nested_common_tags(self, tmp_path):
        path = _write_plan(tmp_path, [
            _change("rg", {"tags": {
                "common_tags": {
                    "more_tags": {"Application": "app"},
                    "Environment": "prod",
                    "ManagedBy": "terraform",
                }
            }}),
        ])
        config = RuleConfig(tags=("Application", "CostCenter", "Environment", "ManagedBy"))

        result = tag_hunter.run(path, config)

        assert result["status"] == "issues"
        assert [i["missing_tags"] for i in result["issues"]] == [["CostCenter"]]
        assert "The resource is missing the following tags: CostCenter." in result["report"]

    def test_json_report(self, tmp_path):
        path = _write_plan(tmp_path, [_change("rg", {"tags": None})])

        result = tag_hunter.run(path, RuleConfig(tags=("Foo", "Bar")), as_json=True)

        data = json.loads(result["report"])
        assert data["issues"][0]["message"] == "The resource is missing the following tags: Foo, Bar."
        assert data["issues"][0]["location"].endswith("azurerm_resource_group.rg")

    def test_unknown_tags_propagate(self, tmp_path):
        path = _write_plan(tmp_path, [_change("rg", {}, after_unknown={"tags": True})])

        with pytest.raises(EvaluationError):
            tag_hunter.run(path, RuleConfig(tags=("Foo",)))


class TestMain:

    def test_exit_zero_when_compliant(self, tmp_path, capsys):
        path = _write_plan(tmp_path, [_change("rg", {"tags": {"Foo": "1"}})])

        code = tag_hunter.main([str(path), "--tags", "Foo"])

        assert code == 0
        assert "None detected" in capsys.readouterr().out

    def test_exit_one_with_issues(self, tmp_path, capsys):
        path = _write_plan(tmp_path, [_change("rg", {"tags": {"foo": "1"}})])

        code = tag_hunter.main([str(path), "--tags", "Foo,Bar"])

        assert code == 1
        assert "The resource is missing the following tags: Foo, Bar." in capsys.readouterr().out

    def test_exclude_flag(self, tmp_path):
        path = _write_plan(tmp_path, [_change("rg", {"tags": {}})])

        code = tag_hunter.main([str(path), "--tags", "Foo", "--exclude", "azurerm_resource_group"])

        assert code == 0

    def test_tags_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("REQUIRED_TAGS", "Owner")
        path = _write_plan(tmp_path, [_change("rg", {"tags": {"Owner": "sre"}})])

        assert tag_hunter.main([str(path)]) == 0

    def test_configuration_error_exit_two(self, tmp_path, monkeypatch, capsys):
        monkeypatch.delenv("REQUIRED_TAGS", raising=False)
        path = _write_plan(tmp_path, [])

        code = tag_hunter.main([str(path)])

        assert code == 2
        assert capsys.readouterr().out == ""

    def test_evaluation_error_exit_two(self, tmp_path):
        code = tag_hunter.main([str(tmp_path / "missing.json"), "--tags", "Foo"])

        assert code == 2

    def test_unreadable_plan_exit_two(self, tmp_path):
        code = tag_hunter.main([str(tmp_path), "--tags", "Foo"])

        assert code == 2

    def test_non_utf8_plan_exit_two(self, tmp_path):
        path = tmp_path / "plan.json"
        path.write_bytes(b"\xff\xfe{}")

        code = tag_hunter.main([str(path), "--tags", "Foo"])

        assert code == 2

    def test_json_flag(self, tmp_path, capsys):
        path = _write_plan(tmp_path, [_change("rg", {"tags": {}})])

        code = tag_hunter.main([str(path), "--tags", "Foo", "--json"])

        assert code == 1
        data = json.loads(capsys.readouterr().out)
        assert data["issues"][0]["missing_tags"] == ["Foo"]
