import io
from pathlib import Path

from greenleeks.config.gitconfig import AuthorInfo
from greenleeks.config.settings import Settings
from greenleeks.core import RunResult, RunState
from greenleeks.ui.console import GreenleeksConsole


def _render(callback):
    buffer = io.StringIO()
    callback(GreenleeksConsole(file=buffer))
    return buffer.getvalue()


def test_run_summary_keeps_bracketed_text():
    result = RunResult(
        root=Path("/work/[draft]"),
        final_state=RunState.DONE,
        author=AuthorInfo(name="Build [bot]", email="bot@example.com"),
        file_count=3,
        commit_sha="0123456789abcdef",
    )

    output = _render(lambda console: console.show_run_summary(result))

    assert "/work/[draft]" in output
    assert "Build [bot] <bot@example.com>" in output
    assert "01234567" in output
    assert "initialized and committed" in output


def test_settings_table_keeps_bracketed_text():
    settings = Settings(gitconfig="/configs/[team]/gitconfig")

    output = _render(lambda console: console.show_settings(settings))

    assert "/configs/[team]/gitconfig" in output
