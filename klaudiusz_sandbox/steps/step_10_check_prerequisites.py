from __future__ import annotations

import logging

from ..outcome import StepOutcome, fatal, ok
from ..pipeline import StepContext

logger = logging.getLogger(__name__)

SANDBOX_EXTENSION_URL = "https://hub.docker.com/extensions/docker/labs-ai-tools-for-devs"


class CheckPrerequisitesStep:
    step_id = "10_check_prerequisites"
    title = "Checking prerequisites..."

    def run(self, ctx: StepContext) -> StepOutcome:
        cfg = ctx.config
        report = ctx.reporter

        if not ctx.runner.is_available("claude"):
            return fatal("Claude CLI is not installed. Please install it first.")
        report.success("Claude CLI installed")

        if not cfg.claude_home.is_dir():
            return fatal(
                f"Claude home directory not found at {cfg.claude_home}",
                hints=["Run `claude` once to create it, or point CLAUDE_HOME at it."],
            )
        report.success(f"Claude home: {cfg.claude_home}")

        if not ctx.runner.is_available("docker"):
            return fatal("Docker is not installed. Please install Docker first.")
        report.success("Docker installed")

        if ctx.runner.run_quiet(["docker", "sandbox", "version"]) != 0:
            return fatal(
                "Docker sandbox extension not found.",
                hints=[f"Install it from: {SANDBOX_EXTENSION_URL}"],
            )
        report.success("Docker sandbox available")

        return ok()
