from __future__ import annotations

import logging

from ..lib.shellrc import alias_command, alias_line, append_alias, existing_rc_files, has_alias
from ..outcome import StepOutcome, ok, warning
from ..pipeline import StepContext

logger = logging.getLogger(__name__)


def sandbox_alias_line(ctx: StepContext) -> str:
    cfg = ctx.config
    command = alias_command(
        image_name=cfg.image_name,
        dockerfile=cfg.dockerfile_path,
        context_dir=cfg.claude_home,
    )
    return alias_line(cfg.alias_name, command)


class RegisterAliasStep:
    step_id = "40_register_alias"
    title = "Configuring shell alias..."

    def run(self, ctx: StepContext) -> StepOutcome:
        cfg = ctx.config
        report = ctx.reporter
        line = sandbox_alias_line(ctx)

        rc_files = existing_rc_files(cfg.shell_rc_candidates)
        if not rc_files:
            # Nothing to edit; hand the line to the user instead.
            report.warn("No shell config file found (~/.zshrc, ~/.bashrc).")
            report.hint("Add this line to your shell config manually:")
            report.info(f"    {line}")
            return ok()

        failed = []
        for rc in rc_files:
            try:
                if has_alias(rc, cfg.alias_name):
                    report.success(f"Alias '{cfg.alias_name}' already configured in {rc}")
                    continue

                if not ctx.prompter.confirm(f"  Add '{cfg.alias_name}' alias to {rc}?", default=True):
                    report.hint(f"Skipped {rc}")
                    continue

                append_alias(rc, line)
            except OSError as e:
                logger.warning("Could not update %s: %s", rc, e)
                report.warn(f"Could not update {rc}: {e}")
                report.hint("Add this line to it manually:")
                report.info(f"    {line}")
                failed.append(str(rc))
                continue

            report.success(f"Added alias '{cfg.alias_name}' to {rc}")

        if failed:
            return warning(f"Alias not registered in {', '.join(failed)}")
        return ok()
