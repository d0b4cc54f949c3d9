from __future__ import annotations

from pathlib import Path

from scripts.check_env_read_placement import check_file

PACKAGE_ROOT = Path(__file__).resolve().parents[3] / "double_buffered"


def test_env_reads_stay_in_config_module() -> None:
    violations: list[str] = []
    for path in sorted(PACKAGE_ROOT.rglob("*.py")):
        rel = path.relative_to(PACKAGE_ROOT.parent).as_posix()
        violations.extend(check_file(path, rel))
    assert violations == []


def test_env_read_check_flags_direct_reads(tmp_path) -> None:
    module = tmp_path / "leaky.py"
    module.write_text(
        "import os\nA = os.getenv('X')\nB = os.environ['Y']\nC = os.environ.get('Z')\n",
        encoding="utf-8",
    )
    violations = check_file(module, "double_buffered/leaky.py")
    assert [line.split(" ", 1)[0] for line in violations] == [
        "double_buffered/leaky.py:2",
        "double_buffered/leaky.py:3",
        "double_buffered/leaky.py:4",
    ]
