import json

import pytest

from mashkanta.cli import main, load_mixes
from tests.factories import mix_json


class TestLoadMixes:
    def test_list_file(self, tmp_path, canonical_mix):
        path = tmp_path / "mixes.json"
        path.write_text(json.dumps([mix_json(canonical_mix)]), encoding="utf-8")
        mixes = load_mixes(path)
        assert len(mixes) == 1
        assert mixes[0].tracks == canonical_mix.tracks

    def test_object_file(self, tmp_path, canonical_mix):
        path = tmp_path / "mixes.json"
        path.write_text(json.dumps({"mixes": [mix_json(canonical_mix)]}), encoding="utf-8")
        assert load_mixes(path)[0].id == "mix-a"


class TestMain:
    def test_single_mix_report(self, tmp_path, capsys, canonical_mix):
        path = tmp_path / "mixes.json"
        path.write_text(json.dumps([mix_json(canonical_mix)]), encoding="utf-8")
        assert main([str(path), "--income", "25000"]) == 0
        out = capsys.readouterr().out
        assert canonical_mix.name in out
        assert "Monthly Payment" in out
        assert "Debt-to-Income" in out
        assert "Comparison" not in out

    def test_comparison_and_schedule(self, tmp_path, capsys, canonical_mix, variable_mix):
        path = tmp_path / "mixes.json"
        path.write_text(
            json.dumps([mix_json(canonical_mix), mix_json(variable_mix)]), encoding="utf-8"
        )
        assert main([str(path), "--schedule"]) == 0
        out = capsys.readouterr().out
        assert "Comparison" in out
        assert "Lowest Monthly" in out
        assert "yearly" in out

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.json")]) == 1
        assert "Error" in capsys.readouterr().err

    def test_undecodable_file(self, tmp_path, capsys):
        path = tmp_path / "latin.json"
        path.write_bytes(b'[{"id": "\xff\xfe"}]')
        assert main([str(path)]) == 1
        assert "Error" in capsys.readouterr().err

    def test_invalid_mix(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"id": "x", "total_amount": "-5"}]), encoding="utf-8")
        assert main([str(path)]) == 1

    def test_empty_list(self, tmp_path, capsys):
        path = tmp_path / "empty.json"
        path.write_text("[]", encoding="utf-8")
        assert main([str(path)]) == 1

    def test_non_positive_income_rejected(self, tmp_path, capsys, canonical_mix):
        path = tmp_path / "mixes.json"
        path.write_text(json.dumps([mix_json(canonical_mix)]), encoding="utf-8")
        for income in ("0", "-100", "abc"):
            with pytest.raises(SystemExit) as exc:
                main([str(path), "--income", income])
            assert exc.value.code == 2
        assert "Debt-to-Income" not in capsys.readouterr().out
