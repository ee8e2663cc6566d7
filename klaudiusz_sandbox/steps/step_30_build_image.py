from __future__ import annotations

import logging

from ..lib.command import fmt_argv
from ..outcome import StepOutcome, fatal, ok
from ..pipeline import StepContext

logger = logging.getLogger(__name__)


def build_argv(ctx: StepContext) -> list[str]:
    cfg = ctx.config
    return [
        "docker",
        "build",
        "-t",
        cfg.image_name,
        "-f",
        str(cfg.dockerfile_path),
        str(cfg.claude_home),
    ]


class BuildImageStep:
    step_id = "30_build_image"
    title = "Building Docker image..."

    def run(self, ctx: StepContext) -> StepOutcome:
        argv = build_argv(ctx)
        ctx.reporter.hint("This may take a few minutes on first run...")

        rc = ctx.runner.run(argv)
        if rc != 0:
            logger.error("docker build exited with %d", rc)
            return fatal(
                "Failed to build Docker image",
                hints=["You can retry manually:", fmt_argv(argv)],
            )

        return ok(f"Built image: {ctx.config.image_name}")
