"""Tests for the generate command."""

from selective_throttler.cli import cli

APP_MODULE = """
ThrottlerModule.for_root(
    [
        {"name": "burst", "ttl": 1000, "limit": 3},
        {"name": "sustained", "ttl": 60000, "limit": 100},
    ]
)
"""

APP_CONTROLLER = """
@single_throttle("burst")
def index():
    return "ok"
"""


def test_generate_writes_artifacts(invoke, project, write_file):
    write_file(project / "app_module.py", APP_MODULE)
    write_file(project / "app_controller.py", APP_CONTROLLER)

    res = invoke(["generate"])

    assert res.exit_code == 0, res.output
    assert "DETAILED ANALYSIS BY FILE" in res.output
    assert "Total discovered throttlers: 2" in res.output
    assert "UNUSED MODULE DEFINITIONS" in res.output
    assert "CODE GENERATION COMPLETED" in res.output
    assert "Generated decorators with 2 throttler names" in res.output

    output_dir = invoke.output_dir
    assert sorted(p.name for p in output_dir.iterdir()) == [
        "decorators.py",
        "decorators.pyi",
        "throttler_names.py",
        "throttler_names.pyi",
    ]
    names = (output_dir / "throttler_names.py").read_text()
    assert '"burst",\n    "sustained",' in names


def test_generate_twice_is_byte_identical(invoke, project, write_file):
    write_file(project / "app_module.py", APP_MODULE)
    write_file(project / "app_controller.py", APP_CONTROLLER)

    assert invoke(["generate", "--silent"]).exit_code == 0
    first = {p.name: p.read_bytes() for p in invoke.output_dir.iterdir()}
    assert invoke(["generate", "--silent"]).exit_code == 0
    second = {p.name: p.read_bytes() for p in invoke.output_dir.iterdir()}

    assert first == second


def test_silent_still_reports_warnings_and_issues(invoke, project, write_file):
    """Test --silent hides info but never warnings or cross-module issues."""
    write_file(
        project / "auth" / "auth_module.py",
        """
        ThrottlerModule.for_root(
            [
                {"name": "auth-login", "ttl": 60000, "limit": 5},
                {"name": "auth-register", "ttl": 60000, "limit": 3},
            ]
        )
        """,
    )
    write_file(
        project / "auth" / "auth_controller.py",
        """
        @single_throttle("auth-login")
        def login():
            pass

        @single_throttle("api-public")
        def status():
            pass
        """,
    )

    res = invoke(["generate", "--silent"])

    assert res.exit_code == 0, res.output
    assert "Scanning" not in res.output
    assert "DETAILED ANALYSIS" not in res.output
    assert "CODE GENERATION COMPLETED" not in res.output
    assert "MISSING MODULE DEFINITIONS" in res.output
    assert "UNUSED MODULE DEFINITIONS" in res.output
    assert "CROSS-MODULE THROTTLER ISSUES DETECTED" in res.output
    assert "Unavailable: [api-public]" in res.output
    assert (invoke.output_dir / "decorators.py").exists()


def test_generate_empty_tree(invoke, project):
    res = invoke(["generate"])

    assert res.exit_code == 0, res.output
    assert "Total discovered throttlers: 0" in res.output
    names = (invoke.output_dir / "throttler_names.py").read_text()
    assert "ALL_THROTTLER_NAMES = ()" in names


def test_generate_reports_unreadable_files(invoke, project, write_file):
    (project / "broken.py").write_bytes(b"\xff\xfe not utf-8")
    write_file(project / "app_controller.py", APP_CONTROLLER)

    res = invoke(["generate"])
    assert res.exit_code == 0, res.output
    assert "Could not read broken.py" in res.output

    silent = invoke(["generate", "--silent"])
    assert "Could not read" not in silent.output


def test_generate_uses_output_env_var(cli_runner, project, write_file, monkeypatch):
    output_dir = project.parent / "from-env"
    monkeypatch.setenv("SELECTIVE_THROTTLER_OUTPUT", str(output_dir))
    write_file(project / "app_controller.py", APP_CONTROLLER)

    res = cli_runner.invoke(cli, ["generate", "--silent"])

    assert res.exit_code == 0, res.output
    assert (output_dir / "throttler_names.py").exists()


def test_generate_fails_when_output_not_writable(cli_runner, project):
    blocker = project.parent / "blocker"
    blocker.write_text("not a directory")

    res = cli_runner.invoke(cli, ["--output", str(blocker / "out"), "generate"])

    assert res.exit_code == 1
    assert "Error: Could not write generated files" in res.output
