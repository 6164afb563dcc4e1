"""Minimal GitHub Actions toolkit: inputs, runner environment and workflow commands."""

from __future__ import annotations

import logging
import os
import sys
import uuid
from collections.abc import Mapping
from pathlib import Path
from typing import TextIO

import typer

from merge_branch_action.errors import ConfigurationError

logger = logging.getLogger(__name__)

GITHUB_API_URL_ENV_VAR = "GITHUB_API_URL"
GITHUB_REPOSITORY_ENV_VAR = "GITHUB_REPOSITORY"
GITHUB_SHA_ENV_VAR = "GITHUB_SHA"
GITHUB_OUTPUT_ENV_VAR = "GITHUB_OUTPUT"


def input_env_var(name: str) -> str:
    """Return the variable the runner uses for input ``name`` (``INPUT_<NAME>``)."""
    return "INPUT_" + name.replace(" ", "_").upper()


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


class GitHubActionsKit:
    """Read the action's configuration and talk back to the runner.

    ``inputs`` take precedence over ``INPUT_*`` variables; blank values count
    as absent. Workflow commands are written to ``stream`` (stdout by
    default).
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        inputs: Mapping[str, str | None] | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.environ = os.environ if environ is None else environ
        self.inputs = dict(inputs or {})
        self._stream = stream

    # ------------------------------------------------------------------ inputs

    def get_input(self, name: str, *, trim: bool = True) -> str | None:
        """Return input ``name``; with ``trim=False`` a non-blank value is kept verbatim."""
        value = self.inputs.get(name)
        if value is None:
            value = self.environ.get(input_env_var(name))
        if value is None or not value.strip():
            return None
        return value.strip() if trim else value

    def get_required_input(self, name: str) -> str:
        value = self.get_input(name)
        if value is None:
            raise ConfigurationError(f"Input required and not supplied: {name}")
        return value

    def get_env(self, name: str) -> str | None:
        value = self.environ.get(name)
        if value is None or not value.strip():
            return None
        return value.strip()

    def get_required_env(self, name: str) -> str:
        value = self.get_env(name)
        if value is None:
            raise ConfigurationError(f"Environment variable required and not set: {name}")
        return value

    @property
    def github_sha(self) -> str:
        return self.get_required_env(GITHUB_SHA_ENV_VAR)

    @property
    def github_repository(self) -> str:
        return self.get_required_env(GITHUB_REPOSITORY_ENV_VAR)

    @property
    def github_api_url(self) -> str | None:
        return self.get_env(GITHUB_API_URL_ENV_VAR)

    # ---------------------------------------------------------------- commands

    def _command(self, command: str, message: str, **properties: str) -> None:
        props = ",".join(f"{key}={_escape_property(value)}" for key, value in properties.items())
        line = f"::{command}{' ' + props if props else ''}::{_escape_data(message)}"
        logger.debug("workflow command %s: %s", command, message)
        typer.echo(line, file=self._stream or sys.stdout)

    def debug(self, message: str) -> None:
        self._command("debug", message)

    def notice(self, message: str) -> None:
        self._command("notice", message)

    def error(self, message: str) -> None:
        self._command("error", message)

    def set_output(self, name: str, value: str) -> None:
        """Publish a step output, through ``$GITHUB_OUTPUT`` when the runner provides it."""
        output_file = self.get_env(GITHUB_OUTPUT_ENV_VAR)
        if output_file is None:
            self._command("set-output", value, name=name)
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with open(Path(output_file), "a", encoding="utf-8") as handle:
            handle.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        logger.debug("Output %s=%s written to %s", name, value, output_file)
