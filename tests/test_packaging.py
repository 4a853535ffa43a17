from pathlib import Path

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def test_package_metadata_has_no_readme_pointer():
    text = PYPROJECT.read_text(encoding="utf-8")
    assert "SPEC_FULL.md" not in text
    assert 'name = "visitor-log"' in text
