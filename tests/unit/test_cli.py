"""
Unit tests for the command-line interface.
"""

import json

from halo_personnummer.cli import main


class TestCli:
    def test_prints_short_form(self, capsys):
        assert main(["198112189876"]) == 0
        assert capsys.readouterr().out.strip() == "811218-9876"

    def test_prints_long_form(self, capsys):
        assert main(["--long", "811218-9876"]) == 0
        assert capsys.readouterr().out.strip() == "198112189876"

    def test_invalid_number(self, capsys):
        assert main(["811218-9870", "811218-9876"]) == 1
        captured = capsys.readouterr()
        assert "811218-9870: checksum mismatch" in captured.err
        assert captured.out.strip() == "811218-9876"

    def test_no_coordination(self, capsys):
        assert main(["121262-1211"]) == 0
        assert main(["--no-coordination", "121262-1211"]) == 1
        assert "coordination numbers not allowed" in capsys.readouterr().err

    def test_json(self, capsys):
        assert main(["--json", "19811278-9873"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["long_format"] == "198112789873"
        assert data["birth_date"] == "1981-12-18"
        assert data["sex"] == "M"
        assert data["is_coordination_number"] is True
        assert data["full_year"] == "1981"
