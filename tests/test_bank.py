import json

import pytest

import bank
from bank import TEMPLATE_BANK, build_bank, list_levels, load_bank_file


def test_builtin_levels_in_order():
    assert [name for name, _ in list_levels()] == ["Recall", "Procedure", "Troubleshooting"]


def test_builtin_levels_have_paired_entries():
    for spec in TEMPLATE_BANK.values():
        assert len(spec.entries) == 3
        for e in spec.entries:
            assert e.template.count("{concept}") == 1
            assert "{concept}" not in e.answer_hint


def test_list_levels_descriptions():
    levels = dict(list_levels())
    assert levels["Recall"] == "Tests basic definitions, safety, and function."
    assert "recall" not in levels


def test_list_levels_for_other_bank():
    other = build_bank({"Only": {"templates": ["{concept}?"], "answer_hints": ["Yes."], "description": "d"}})
    assert list_levels(other) == [("Only", "d")]


def test_bank_is_read_only():
    with pytest.raises(TypeError):
        TEMPLATE_BANK["New"] = TEMPLATE_BANK["Recall"]


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        build_bank({"Bad": {"templates": ["A {concept}", "B {concept}"], "answer_hints": ["a"]}})


def test_template_without_placeholder_rejected():
    with pytest.raises(ValueError):
        build_bank({"Bad": {"templates": ["No slot"], "answer_hints": ["a"]}})


def test_template_with_two_placeholders_rejected():
    with pytest.raises(ValueError):
        build_bank({"Bad": {"templates": ["{concept} and {concept}"], "answer_hints": ["a"]}})


def test_hint_with_placeholder_rejected():
    with pytest.raises(ValueError):
        build_bank({"Bad": {"templates": ["{concept}"], "answer_hints": ["about {concept}"]}})


def test_load_bank_file_skips_invalid_levels(tmp_path):
    p = tmp_path / "bank.json"
    p.write_text(
        json.dumps(
            {
                "Good": {
                    "templates": ["Explain {concept}."],
                    "answer_hints": ["Two sentences."],
                    "description": "Short answers.",
                },
                "Broken": {"templates": ["X {concept}"], "answer_hints": []},
                "NotAnObject": ["nope"],
            }
        ),
        encoding="utf-8",
    )
    bank = load_bank_file(p)
    assert list(bank) == ["Good"]
    assert bank["Good"].entries[0].answer_hint == "Two sentences."


def test_load_bank_file_broken_json(tmp_path):
    p = tmp_path / "bank.json"
    p.write_text("{not json", encoding="utf-8")
    assert dict(load_bank_file(p)) == {}


def test_load_bank_file_missing(tmp_path):
    assert dict(load_bank_file(tmp_path / "missing.json")) == {}


def test_load_bank_file_not_utf8(tmp_path):
    p = tmp_path / "bank.json"
    p.write_bytes(b"\xff\xfe{bad")
    assert dict(load_bank_file(p)) == {}


def test_load_bank_file_list_root(tmp_path):
    p = tmp_path / "bank.json"
    p.write_text(json.dumps([{"templates": ["{concept}"], "answer_hints": ["x"]}]), encoding="utf-8")
    assert dict(load_bank_file(p)) == {}


def test_load_bank_file_unreadable(tmp_path, monkeypatch):
    p = tmp_path / "bank.json"
    p.write_text("{}", encoding="utf-8")

    def denied(*args, **kwargs):
        raise PermissionError("denied")

    monkeypatch.setattr(type(p), "open", denied)
    assert dict(load_bank_file(p)) == {}


def test_initial_bank_from_file(tmp_path, monkeypatch):
    p = tmp_path / "bank.json"
    p.write_text(
        json.dumps({"Basics": {"templates": ["Name {concept}."], "answer_hints": ["One word."]}}),
        encoding="utf-8",
    )
    monkeypatch.setattr(bank, "TEMPLATES_FILE", str(p))
    assert list(bank._initial_bank()) == ["Basics"]


def test_initial_bank_falls_back_on_invalid_file(tmp_path, monkeypatch):
    p = tmp_path / "bank.json"
    p.write_text(json.dumps({"Bad": {"templates": ["no slot"], "answer_hints": ["x"]}}), encoding="utf-8")
    monkeypatch.setattr(bank, "TEMPLATES_FILE", str(p))
    assert list(bank._initial_bank()) == ["Recall", "Procedure", "Troubleshooting"]


def test_initial_bank_falls_back_on_list_root(tmp_path, monkeypatch):
    p = tmp_path / "bank.json"
    p.write_text("[]", encoding="utf-8")
    monkeypatch.setattr(bank, "TEMPLATES_FILE", str(p))
    assert list(bank._initial_bank()) == ["Recall", "Procedure", "Troubleshooting"]


def test_initial_bank_falls_back_on_undecodable_file(tmp_path, monkeypatch):
    p = tmp_path / "bank.json"
    p.write_bytes(b"\xff\xfe{bad")
    monkeypatch.setattr(bank, "TEMPLATES_FILE", str(p))
    assert list(bank._initial_bank()) == ["Recall", "Procedure", "Troubleshooting"]


def test_initial_bank_without_file(monkeypatch):
    monkeypatch.setattr(bank, "TEMPLATES_FILE", "")
    assert list(bank._initial_bank()) == ["Recall", "Procedure", "Troubleshooting"]
