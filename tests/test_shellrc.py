"""Tests for klaudiusz_sandbox/lib/shellrc.py."""

from pathlib import Path

from klaudiusz_sandbox.lib.shellrc import (
    ALIAS_COMMENT,
    alias_command,
    alias_line,
    append_alias,
    existing_rc_files,
    has_alias,
)


def test_alias_command_rebuilds_then_runs() -> None:
    cmd = alias_command(
        image_name="claude-dev-bun",
        dockerfile=Path("/home/u/.klaudiusz-sandbox/Dockerfile.bun"),
        context_dir=Path("/home/u/.claude"),
    )

    assert cmd == (
        "docker build -q -t claude-dev-bun -f /home/u/.klaudiusz-sandbox/Dockerfile.bun /home/u/.claude"
        " >/dev/null && docker sandbox run --template claude-dev-bun claude"
    )


def test_alias_command_quotes_paths_with_spaces() -> None:
    cmd = alias_command(
        image_name="img",
        dockerfile=Path("/Users/Jane Doe/.klaudiusz-sandbox/Dockerfile.bun"),
        context_dir=Path("/Users/Jane Doe/.claude"),
    )

    assert "-f '/Users/Jane Doe/.klaudiusz-sandbox/Dockerfile.bun' '/Users/Jane Doe/.claude'" in cmd


def test_alias_line_escapes_single_quotes() -> None:
    assert alias_line("k", "echo hi") == "alias k='echo hi'"
    assert alias_line("k", "echo 'hi'") == "alias k='echo '\\''hi'\\'''"


def test_has_alias_substring_match(tmp_path: Path) -> None:
    rc = tmp_path / ".bashrc"
    rc.write_text("export PATH=$PATH:~/bin\nalias klaudiusz='something else'\n")

    assert has_alias(rc, "klaudiusz")
    assert not has_alias(rc, "klaud")


def test_has_alias_ignores_similar_names(tmp_path: Path) -> None:
    rc = tmp_path / ".zshrc"
    rc.write_text("alias klaudiusz2='x'\n")

    assert not has_alias(rc, "klaudiusz")


def test_append_alias_writes_block(tmp_path: Path) -> None:
    rc = tmp_path / ".bashrc"
    rc.write_text("# existing\n")

    append_alias(rc, "alias klaudiusz='x'")

    assert rc.read_text() == f"# existing\n\n{ALIAS_COMMENT}\nalias klaudiusz='x'\n"


def test_existing_rc_files(tmp_path: Path) -> None:
    (tmp_path / ".bashrc").write_text("")
    (tmp_path / ".zshrc").mkdir()  # not a file

    found = existing_rc_files([tmp_path / ".zshrc", tmp_path / ".bashrc", tmp_path / ".profile"])

    assert found == [tmp_path / ".bashrc"]
