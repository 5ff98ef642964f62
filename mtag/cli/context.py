from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from mtag.core.config import CONFIG_FILENAME, Config, load_config, load_config_or_default
from mtag.core.errors import ErrorCode
from mtag.core.result import Err
from mtag.output.console import ConsoleProtocol, RichConsole

ROOT_ENV = "MTAG_ROOT"
CONFIG_ENV = "MTAG_CONFIG"
VERBOSE_ENV = "MTAG_VERBOSE"


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    config: Config
    # diagnostics (stderr)
    console: ConsoleProtocol
    # human-readable results (stdout)
    out: ConsoleProtocol

    @property
    def namespaces_dir(self) -> Path | None:
        if self.config.namespaces.dir is None:
            return None
        return self.root / self.config.namespaces.dir


def _root_from_env() -> Path:
    env = os.environ.get(ROOT_ENV)
    if env:
        return Path(env).expanduser().resolve()
    return Path.cwd()


def build_context() -> CLIContext:
    root = _root_from_env()
    verbose = os.environ.get(VERBOSE_ENV) == "1"

    config_env = os.environ.get(CONFIG_ENV)
    if config_env:
        config_result = load_config(Path(config_env).expanduser())
    else:
        config_result = load_config_or_default(root / CONFIG_FILENAME)
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    return CLIContext(
        root=root,
        config=config_result.value,
        console=RichConsole(stderr=True, verbose=verbose),
        out=RichConsole(stderr=False),
    )
