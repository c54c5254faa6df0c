"""Interactive init flow.

``run_init`` is the whole command: refuse to run when a config already
exists, offer to install the library, ask the wizard questions, and write
``release-hub.json`` once at the end. Nothing is written when any step fails
or the user cancels a prompt.

The wizard is a state machine over ``InitSession``. Each step reads one
answer and returns a new session holding a new ``ReleaseConfig``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from functools import partial
from typing import Literal

from create_release_hub.cli.init_fsm import (
    StepHandler,
    StepOutcome,
    advance,
    finish,
    run_state_machine,
)
from create_release_hub.cli.prompts import (
    PromptOption,
    confirm,
    prompt_text,
    select_many,
    select_one,
)
from create_release_hub.core.constants import CONFIG_FILE, LIBRARY_NAME
from create_release_hub.core.errors import InitError
from create_release_hub.core.project import ProjectContext
from create_release_hub.core.release_config import (
    DEFAULT_TARGET_PATHS,
    RELEASE_TYPES,
    TARGETS,
    ReleaseConfig,
    ReleaseType,
    Target,
    is_relative_path,
)
from create_release_hub.core.result import Err, Ok, Result
from create_release_hub.output.console import ConsoleProtocol
from create_release_hub.services.config_writer import write_config
from create_release_hub.services.dependency import is_library_installed
from create_release_hub.services.existing_config import has_existing_config
from create_release_hub.services.installer import install_dependency
from create_release_hub.services.package_manager import detect_package_manager

InitStep = Literal[
    "install",
    "release_type",
    "targets",
    "paths",
    "sync_mode",
    "sync_group",
    "more_groups",
]
SyncMode = Literal["all", "none", "groups"]

_RELEASE_TYPE_DETAILS: Mapping[ReleaseType, str] = {
    "major": "Breaking changes",
    "minor": "New features",
    "patch": "Bug fixes",
}

_TARGET_DETAILS: Mapping[Target, str] = {
    "node": "npm package (package.json)",
    "jsr": "JSR package (jsr.json)",
    "deno": "Deno module (deno.json)",
    "webext": "Browser extension (manifest.json)",
}


@dataclass(frozen=True, slots=True)
class InitSession:
    step: InitStep
    config: ReleaseConfig


def _cancelled() -> Err[InitError]:
    return Err(InitError(kind="cancelled", message="Operation cancelled"))


def validate_target_path(value: str) -> str | None:
    if is_relative_path(value):
        return None
    return "Path must start with ./ or ../"


# -- steps ---------------------------------------------------------------


def step_install(
    session: InitSession,
    *,
    project: ProjectContext,
    console: ConsoleProtocol,
    env: Mapping[str, str] | None,
) -> Result[StepOutcome[InitSession], InitError]:
    answer = confirm(prompt=f"{LIBRARY_NAME} is not installed. Install it now?", default=True)
    if answer.cancelled:
        return _cancelled()

    if not answer.value:
        console.warning(f"Skipping install; add {LIBRARY_NAME} to devDependencies later")
        return Ok(advance(replace(session, step="release_type")))

    manager = detect_package_manager(project, env)
    installed = install_dependency(manager, project, console)
    if isinstance(installed, Err):
        return Err(
            InitError(
                kind="install_failed",
                message=str(installed.error),
                hint=f"run `{' '.join(manager.install_command)}` manually",
            )
        )
    return Ok(advance(replace(session, step="release_type")))


def step_release_type(session: InitSession) -> Result[StepOutcome[InitSession], InitError]:
    options = [
        PromptOption(value=rt, label=rt, detail=_RELEASE_TYPE_DETAILS[rt]) for rt in RELEASE_TYPES
    ]
    answer = select_one(
        title="Default release type",
        subtitle="Used when a release does not name a bump",
        options=options,
        initial_index=RELEASE_TYPES.index("patch"),
    )
    if answer.cancelled or answer.value is None:
        return _cancelled()

    config = session.config.with_release_type(answer.value)
    return Ok(advance(replace(session, step="targets", config=config)))


def step_targets(session: InitSession) -> Result[StepOutcome[InitSession], InitError]:
    options = [PromptOption(value=t, label=t, detail=_TARGET_DETAILS[t]) for t in TARGETS]
    answer = select_many(
        title="Version targets",
        subtitle="Manifests whose version release-hub should bump",
        options=options,
        initial=["node"],
    )
    if answer.cancelled or answer.value is None:
        return _cancelled()

    config = session.config.with_targets(answer.value)
    return Ok(advance(replace(session, step="paths", config=config)))


def step_paths(session: InitSession) -> Result[StepOutcome[InitSession], InitError]:
    """Ask for the next target without a path; stay here until all have one."""
    missing = session.config.missing_paths
    if not missing:
        return Ok(advance(replace(session, step="sync_mode")))

    target = missing[0]
    answer = prompt_text(
        message=f"Path to the {target} manifest",
        default=DEFAULT_TARGET_PATHS[target],
        validate=validate_target_path,
    )
    if answer.cancelled or answer.value is None:
        return _cancelled()

    config = session.config.with_target_path(target, answer.value)
    return Ok(advance(replace(session, config=config)))


def step_sync_mode(session: InitSession) -> Result[StepOutcome[InitSession], InitError]:
    options: list[PromptOption[SyncMode]] = [
        PromptOption(value="all", label="all", detail="Every target shares one version"),
        PromptOption(value="none", label="none", detail="Each target is versioned on its own"),
        PromptOption(value="groups", label="groups", detail="Pick groups that share a version"),
    ]
    answer = select_one(title="Version sync", options=options, initial_index=0)
    if answer.cancelled or answer.value is None:
        return _cancelled()

    match answer.value:
        case "all":
            return Ok(finish(replace(session, config=session.config.with_sync(True))))
        case "none":
            return Ok(finish(replace(session, config=session.config.with_sync(False))))
        case "groups":
            return Ok(advance(replace(session, step="sync_group")))


def step_sync_group(
    session: InitSession,
    *,
    console: ConsoleProtocol,
) -> Result[StepOutcome[InitSession], InitError]:
    enabled = set(session.config.targets)
    options = [
        PromptOption(value=t, label=t, detail="enabled" if t in enabled else None)
        for t in TARGETS
    ]
    number = len(session.config.sync) + 1 if isinstance(session.config.sync, tuple) else 1
    answer = select_many(
        title=f"Sync group {number}",
        subtitle="Select at least 2 targets that share a version",
        options=options,
    )
    if answer.cancelled or answer.value is None:
        return _cancelled()

    if len(answer.value) < 2:
        console.error("A sync group needs at least 2 targets")
        return Ok(advance(session))

    config = session.config.with_sync_group(answer.value)
    return Ok(advance(replace(session, step="more_groups", config=config)))


def step_more_groups(session: InitSession) -> Result[StepOutcome[InitSession], InitError]:
    answer = confirm(prompt="Add another sync group?", default=False)
    if answer.cancelled:
        return _cancelled()
    if answer.value:
        return Ok(advance(replace(session, step="sync_group")))
    return Ok(finish(session))


# -- flow ----------------------------------------------------------------


def run_init_wizard(
    *,
    project: ProjectContext,
    console: ConsoleProtocol,
    installed: bool,
    env: Mapping[str, str] | None = None,
) -> Result[ReleaseConfig, InitError]:
    """Ask the wizard questions and return the assembled config."""
    handlers: dict[str, StepHandler[InitSession]] = {
        "install": partial(step_install, project=project, console=console, env=env),
        "release_type": step_release_type,
        "targets": step_targets,
        "paths": step_paths,
        "sync_mode": step_sync_mode,
        "sync_group": partial(step_sync_group, console=console),
        "more_groups": step_more_groups,
    }
    first: InitStep = "release_type" if installed else "install"

    result = run_state_machine(
        initial_state=InitSession(step=first, config=ReleaseConfig()),
        get_step=lambda s: s.step,
        handlers=handlers,
    )
    if isinstance(result, Err):
        return result
    return Ok(result.value.config)


def run_init(
    *,
    project: ProjectContext,
    console: ConsoleProtocol,
    env: Mapping[str, str] | None = None,
    interactive: bool = True,
) -> Result[ReleaseConfig, InitError]:
    """Create release-hub.json in ``project`` interactively.

    The existing-config check runs before the terminal check.
    """
    console.intro("create-release-hub")

    if has_existing_config(project, console):
        return Err(
            InitError(
                kind="config_exists",
                message="A Release Hub config already exists in this project",
            )
        )

    if not interactive:
        return Err(
            InitError(
                kind="not_interactive",
                message="create-release-hub needs an interactive terminal",
                hint="run it directly in a terminal, not through a pipe",
            )
        )

    installed = is_library_installed(project, console)
    if not installed:
        console.warning(f"{LIBRARY_NAME} is not installed in this project")

    assembled = run_init_wizard(project=project, console=console, installed=installed, env=env)
    if isinstance(assembled, Err):
        return assembled
    config = assembled.value

    path = project.root / CONFIG_FILE
    console.step(f"Generating configuration file: ./{CONFIG_FILE}")
    written = write_config(config, path)
    if isinstance(written, Err):
        return Err(
            InitError(
                kind="write_failed",
                message=f"Cannot write {path}: {written.error.message}",
            )
        )

    console.success(f"Created configuration file: ./{CONFIG_FILE}")
    console.outro("You're all set!")
    return Ok(config)

