from pathlib import Path

ROOT = Path(__file__).parent.parent


def test_readme_is_the_package_description():
    pyproject = (ROOT / "pyproject.toml").read_text(encoding="utf-8")

    assert 'readme = "README.md"' in pyproject
    assert (ROOT / "README.md").exists()
