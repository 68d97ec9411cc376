import pytest


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep configuration lookups independent of the developer's shell.

    ConfigLoader reads CLINVAL_* variables and ./clinval.toml; tests start
    from a clean environment in an empty working directory.
    """
    for name in (
        "CLINVAL_TOLERANCE",
        "CLINVAL_REPORT_FORMAT",
        "CLINVAL_PACKAGE",
        "CLINVAL_FAIL_ON_ERRORS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
