"""Uninstall steps.

Each step is best-effort: a failure is reported as a warning and the next
step still runs.
"""

from __future__ import annotations

import logging

from ..lib.files import remove_file, remove_tree
from ..outcome import StepOutcome, ok, warning
from ..pipeline import StepContext

logger = logging.getLogger(__name__)


class RemoveImageStep:
    step_id = "10_remove_image"
    title = "Removing Docker image..."

    def run(self, ctx: StepContext) -> StepOutcome:
        image = ctx.config.image_name
        try:
            rc = ctx.runner.run_quiet(["docker", "rmi", image])
        except OSError as e:
            logger.warning("Could not run docker rmi: %s", e)
            return warning(f"Could not remove image {image}: {e}")
        if rc != 0:
            return warning(f"Image {image} not found or in use")
        return ok(f"Removed image: {image}")


class RemoveSandboxHomeStep:
    step_id = "20_remove_sandbox_home"
    title = "Removing sandbox directory..."

    def run(self, ctx: StepContext) -> StepOutcome:
        path = ctx.config.sandbox_home
        try:
            removed = remove_tree(path)
        except OSError as e:
            logger.warning("Could not remove %s: %s", path, e)
            return warning(f"Could not remove {path}: {e}")
        if not removed:
            return ok(f"{path} not found")
        return ok(f"Removed {path}")


class RemoveDockerignoreStep:
    step_id = "30_remove_dockerignore"
    title = "Removing .dockerignore..."

    def run(self, ctx: StepContext) -> StepOutcome:
        path = ctx.config.dockerignore_path
        try:
            removed = remove_file(path)
        except OSError as e:
            logger.warning("Could not remove %s: %s", path, e)
            return warning(f"Could not remove {path}: {e}")
        if not removed:
            return ok(".dockerignore not found")
        return ok(f"Removed {path}")
