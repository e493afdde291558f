"""Tests for custom project pylint rules."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

_SRC_DIR = Path(__file__).resolve().parents[1] / "src"


def _run_pylint_for_source(
    *,
    tmp_path: Path,
    source: str,
    enable: str,
) -> subprocess.CompletedProcess[str]:
    file_path = tmp_path / "lint_target.py"
    file_path.write_text(source, encoding="utf-8")
    env = dict(os.environ)
    env["PYTHONPATH"] = str(_SRC_DIR)
    return subprocess.run(
        [
            sys.executable,
            "-m",
            "pylint",
            str(file_path),
            "-rn",
            "-sn",
            "--disable=all",
            f"--enable={enable}",
            "--load-plugins=project_pylint_rules",
        ],
        check=False,
        capture_output=True,
        text=True,
        env=env,
    )


def test_prefer_optional_rule_triggers_for_pipe_none(tmp_path: Path) -> None:
    """The rule should reject ``T | None`` syntax."""
    result = _run_pylint_for_source(
        tmp_path=tmp_path,
        source="from __future__ import annotations\nvalue: str | None = None\n",
        enable="prefer-optional",
    )
    combined_output = f"{result.stdout}\n{result.stderr}"
    assert result.returncode != 0, combined_output
    assert "prefer-optional" in combined_output, combined_output


def test_no_object_annotation_rule_triggers(tmp_path: Path) -> None:
    """Parameters annotated with ``object`` are rejected."""
    result = _run_pylint_for_source(
        tmp_path=tmp_path,
        source="def describe(value: object) -> str:\n    return str(value)\n",
        enable="no-object-annotation",
    )
    combined_output = f"{result.stdout}\n{result.stderr}"
    assert result.returncode != 0, combined_output
    assert "no-object-annotation" in combined_output, combined_output


def test_direct_json_parse_rule_triggers_for_json_loads(tmp_path: Path) -> None:
    """Calling ``json.loads`` outside the decoder is rejected."""
    result = _run_pylint_for_source(
        tmp_path=tmp_path,
        source='import json\n\nVALUE = json.loads("[1, 2]")\n',
        enable="direct-json-parse",
    )
    combined_output = f"{result.stdout}\n{result.stderr}"
    assert result.returncode != 0, combined_output
    assert "direct-json-parse" in combined_output, combined_output


def test_direct_json_parse_rule_triggers_for_imported_name(tmp_path: Path) -> None:
    """``from json import loads as parse`` is caught through the alias."""
    result = _run_pylint_for_source(
        tmp_path=tmp_path,
        source='from json import loads as parse\n\nVALUE = parse("[1, 2]")\n',
        enable="direct-json-parse",
    )
    combined_output = f"{result.stdout}\n{result.stderr}"
    assert result.returncode != 0, combined_output
    assert "direct-json-parse" in combined_output, combined_output


def test_direct_json_parse_rule_allows_serialization(tmp_path: Path) -> None:
    """Only parsing is restricted; ``json.dumps`` stays allowed."""
    result = _run_pylint_for_source(
        tmp_path=tmp_path,
        source='import json\n\nTEXT = json.dumps([1, 2])\n',
        enable="direct-json-parse",
    )
    combined_output = f"{result.stdout}\n{result.stderr}"
    assert result.returncode == 0, combined_output


def test_decoder_module_is_clean(tmp_path: Path) -> None:
    """The decoder module itself may call the standard parser."""
    result = subprocess.run(
        [
            sys.executable,
            "-m",
            "pylint",
            str(_SRC_DIR / "json_text_decoder"),
            "-rn",
            "-sn",
            "--disable=all",
            "--enable=direct-json-parse,prefer-optional,no-object-annotation",
            "--load-plugins=project_pylint_rules",
        ],
        check=False,
        capture_output=True,
        text=True,
        env={**os.environ, "PYTHONPATH": str(_SRC_DIR)},
        cwd=tmp_path,
    )
    combined_output = f"{result.stdout}\n{result.stderr}"
    assert result.returncode == 0, combined_output
