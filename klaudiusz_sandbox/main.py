from __future__ import annotations

import argparse
import logging
from typing import Optional

from rich.console import Console

from .config import SandboxConfig
from .lib.command import CommandRunner, SubprocessRunner
from .lib.shellrc import rc_files_with_alias
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import PipelineResult, StepContext, run_pipeline
from .prompt import ConsolePrompter, Prompter
from .reporter import Reporter
from .steps import (
    BuildImageStep,
    CheckPrerequisitesStep,
    InstallTemplatesStep,
    RegisterAliasStep,
    RemoveDockerignoreStep,
    RemoveImageStep,
    RemoveSandboxHomeStep,
)

logger = logging.getLogger(__name__)

PROG = "klaudiusz-sandbox-setup"


def build_install_steps():
    return [
        CheckPrerequisitesStep(),
        InstallTemplatesStep(),
        BuildImageStep(),
        RegisterAliasStep(),
    ]


def build_uninstall_steps():
    return [
        RemoveImageStep(),
        RemoveSandboxHomeStep(),
        RemoveDockerignoreStep(),
    ]


def install(ctx: StepContext) -> PipelineResult:
    """Check prerequisites, install templates, build the image and set up the alias."""

    report = ctx.reporter
    report.banner("Klaudiusz Sandbox Setup", "Docker + Bun environment for Claude")

    result = run_pipeline(ctx=ctx, steps=build_install_steps())
    if not result.ok:
        return result

    cfg = ctx.config
    report.banner("Setup complete!", style="green")
    report.info("\nUsage:", style="blue")
    report.info(f"  {cfg.alias_name}    # Start sandbox in current directory (open a new shell first)")
    report.info(f"  docker sandbox run --template {cfg.image_name} claude")
    return result


def uninstall(ctx: StepContext) -> Optional[PipelineResult]:
    """Remove the image, the sandbox home and the installed .dockerignore.

    Returns None when the user declines.
    """

    report = ctx.reporter
    report.banner("Klaudiusz Sandbox Uninstall", style="yellow")

    if not ctx.prompter.confirm(
        "\nThis will remove all Klaudiusz Sandbox artifacts. Continue?",
        default=False,
    ):
        report.info("\nUninstall cancelled.", style="dim")
        return None

    result = run_pipeline(ctx=ctx, steps=build_uninstall_steps())

    cfg = ctx.config
    report.banner("Uninstall complete!", style="green")

    leftover = rc_files_with_alias(cfg.shell_rc_candidates, cfg.alias_name)
    for rc in leftover:
        report.info(f"\nThe '{cfg.alias_name}' alias is still defined in {rc}; delete it by hand.", style="dim")

    report.info("\nTo remove the CLI commands, run:", style="dim")
    report.info("  pip uninstall klaudiusz-sandbox", style="dim")
    return result


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description="Klaudiusz Sandbox - Docker environment for Claude Code",
        epilog=(
            "After setup, use:\n"
            "  klaudiusz              Start sandbox in current directory\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--uninstall", action="store_true", help="Remove all Klaudiusz Sandbox artifacts")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to setup log")
    p.add_argument("--verbose", action="store_true", help="Also print log records to stderr")
    return p


def main(
    argv: Optional[list[str]] = None,
    *,
    config: Optional[SandboxConfig] = None,
    runner: Optional[CommandRunner] = None,
    prompter: Optional[Prompter] = None,
    console: Optional[Console] = None,
) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(log_path=args.log, also_console=bool(args.verbose))

    console = console or Console(highlight=False, emoji=False)
    reporter = Reporter(console)
    ctx = StepContext(
        config=config or SandboxConfig.from_env(),
        runner=runner or SubprocessRunner(),
        prompter=prompter or ConsolePrompter(console),
        reporter=reporter,
    )
    logger.info("Config: %s", ctx.config)

    try:
        if args.uninstall:
            result = uninstall(ctx)
            if result is None:
                return 0
        else:
            result = install(ctx)
    except Exception as e:
        logger.exception("Setup failed")
        reporter.error(str(e))
        return 1

    if result.warnings:
        logger.info("Finished with %d warning(s)", len(result.warnings))
    return result.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
