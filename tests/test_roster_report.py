"""Tests for the roster_report CLI."""

import json
from pathlib import Path

from scripts.roster_report import DEFAULT_SOURCE, main


class TestRosterReport:
    def test_default_source_is_shipped_data(self):
        assert Path(DEFAULT_SOURCE).is_file()

    def test_reports_on_shipped_data(self, monkeypatch, capsys, caplog):
        monkeypatch.delenv("ROSTER_SOURCE", raising=False)
        main([])

        stats = json.loads(capsys.readouterr().out)
        assert stats["total"] == 5
        assert stats["active"] == 4
        assert "fallback" not in caplog.text

    def test_authenticate_option(self, tmp_path, monkeypatch, capsys):
        csv_file = tmp_path / "users.csv"
        csv_file.write_text(
            "email,password,role,firstName,lastName,status\n"
            "ana@club.com,AnaPass1,staff,Ana,Roux,active\n",
            encoding="utf-8",
        )
        monkeypatch.setenv("ROSTER_SOURCE", str(csv_file))
        main(["--email", "ANA@club.com", "--password", "AnaPass1"])
        assert json.loads(capsys.readouterr().out)["by_role"] == {"staff": 1}
