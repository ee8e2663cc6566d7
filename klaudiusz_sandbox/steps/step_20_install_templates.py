from __future__ import annotations

import logging

from ..config import DEFAULT_DOCKERIGNORE
from ..lib.files import copy_file, ensure_dir, write_text
from ..outcome import StepOutcome, fatal, ok
from ..pipeline import StepContext

logger = logging.getLogger(__name__)


class InstallTemplatesStep:
    step_id = "20_install_templates"
    title = "Installing Dockerfile template..."

    def run(self, ctx: StepContext) -> StepOutcome:
        cfg = ctx.config
        report = ctx.reporter

        if ensure_dir(cfg.sandbox_home):
            report.success(f"Created {cfg.sandbox_home}")
        else:
            report.success(f"{cfg.sandbox_home} exists")

        # A missing Dockerfile means a broken install of this package.
        if not cfg.dockerfile_template.is_file():
            logger.error("Bundled template missing: %s", cfg.dockerfile_template)
            return fatal(
                f"Template {cfg.dockerfile_template.name} not found in package.",
                hints=["Reinstall klaudiusz-sandbox to restore the bundled templates."],
            )
        copy_file(cfg.dockerfile_template, cfg.dockerfile_path)
        report.success(f"Copied Dockerfile to {cfg.dockerfile_path}")

        # The ignore-file keeps the build context down to what the Dockerfile copies.
        if cfg.dockerignore_template.is_file():
            copy_file(cfg.dockerignore_template, cfg.dockerignore_path)
            report.success(f"Copied .dockerignore to {cfg.dockerignore_path}")
        else:
            report.warn(".dockerignore template not found, creating default...")
            write_text(cfg.dockerignore_path, DEFAULT_DOCKERIGNORE)
            report.success("Created default .dockerignore")

        return ok()
