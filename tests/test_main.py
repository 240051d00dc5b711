"""Tests for the command line entry point."""
import io
import os
import sys

import pytest

import main


def keyed(answers):
    """Input function answering by prompt substring, blank otherwise."""
    def reply(prompt):
        for key, value in answers.items():
            if key in prompt:
                return value
        return ''
    return reply


class TestMain:
    """Tests for main()."""

    def test_generates_file(self, defaults_file, tmp_path):
        output = str(tmp_path / "plate.nc")
        answers = keyed({'Output file': output, 'Comment': 'Plate', 'Proceed': 'y'})

        assert main.main(['--config', defaults_file], input_func=answers) == 0

        with open(output) as f:
            lines = f.read().splitlines()
        assert lines[0] == "%"
        assert "(Plate)" in lines
        assert lines[-1] == "%"
        # 4 holes, 3 rings each
        assert sum(1 for line in lines if line.startswith("G00 X")) == 12

    def test_missing_config(self, tmp_path, capsys):
        missing = str(tmp_path / "none.cfg")
        assert main.main(['--config', missing], input_func=keyed({})) == 1
        assert missing in capsys.readouterr().err

    def test_invalid_parameters(self, defaults_file, tmp_path, capsys):
        output = str(tmp_path / "plate.nc")
        answers = keyed({'Hole diameter': '5', 'Output file': output, 'Proceed': 'y'})

        assert main.main(['--config', defaults_file], input_func=answers) == 1
        assert not os.path.exists(output)
        assert "Invalid parameters" in capsys.readouterr().err

    def test_overwrite_declined(self, defaults_file, tmp_path):
        output = tmp_path / "plate.nc"
        output.write_text("keep me")
        answers = keyed({'Output file': str(output), 'Overwrite': 'n', 'Proceed': 'y'})

        assert main.main(['--config', defaults_file], input_func=answers) == 0
        assert output.read_text() == "keep me"

    def test_overwrite_accepted(self, defaults_file, tmp_path):
        output = tmp_path / "plate.nc"
        output.write_text("old")
        answers = keyed({'Output file': str(output), 'Overwrite': 'y', 'Proceed': 'y'})

        assert main.main(['--config', defaults_file], input_func=answers) == 0
        assert output.read_text().startswith("%\n")

    def test_summary_declined(self, defaults_file, tmp_path):
        output = tmp_path / "plate.nc"
        answers = keyed({'Output file': str(output), 'Proceed': 'n'})

        assert main.main(['--config', defaults_file], input_func=answers) == 0
        assert not output.exists()

    def test_stdout_output(self, defaults_file, capsys):
        answers = keyed({'Proceed': 'y'})

        assert main.main(['--config', defaults_file], input_func=answers) == 0
        out = capsys.readouterr().out
        assert out.startswith("%\n")
        assert out.rstrip().endswith("%")

    def test_preview(self, defaults_file, tmp_path):
        output = str(tmp_path / "plate.nc")
        answers = keyed({'Output file': output, 'Proceed': 'y'})

        assert main.main(['--config', defaults_file, '--preview'], input_func=answers) == 0
        assert os.path.exists(str(tmp_path / "plate_preview.png"))

    def test_stdout_output_from_stdin(self, defaults_file, monkeypatch, capsys):
        """Console prompts go to stderr so the program on stdout stays clean."""
        # 21 blank answers accept every default, then confirm the summary
        monkeypatch.setattr(sys, 'stdin', io.StringIO("\n" * 21 + "y\n"))

        assert main.main(['--config', defaults_file]) == 0
        captured = capsys.readouterr()
        assert captured.out.startswith("%\n")
        assert "Units" not in captured.out
        assert "Tool diameter" in captured.err
        assert "(default: mm)" in captured.err

    def test_input_ends_early(self, defaults_file, monkeypatch, capsys):
        monkeypatch.setattr(sys, 'stdin', io.StringIO("\n" * 3))

        assert main.main(['--config', defaults_file]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Input ended" in captured.err

    def test_interrupted_at_confirmation(self, defaults_file, tmp_path, capsys):
        output = str(tmp_path / "plate.nc")

        def reply(prompt):
            if 'Proceed' in prompt:
                raise KeyboardInterrupt
            return output if 'Output file' in prompt else ''

        assert main.main(['--config', defaults_file], input_func=reply) == 1
        assert not os.path.exists(output)
        assert "❌ ERROR" in capsys.readouterr().err
