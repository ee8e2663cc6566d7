from .step_10_check_prerequisites import CheckPrerequisitesStep
from .step_20_install_templates import InstallTemplatesStep
from .step_30_build_image import BuildImageStep
from .step_40_register_alias import RegisterAliasStep
from .uninstall import RemoveDockerignoreStep, RemoveImageStep, RemoveSandboxHomeStep

__all__ = [
    "CheckPrerequisitesStep",
    "InstallTemplatesStep",
    "BuildImageStep",
    "RegisterAliasStep",
    "RemoveImageStep",
    "RemoveSandboxHomeStep",
    "RemoveDockerignoreStep",
]
