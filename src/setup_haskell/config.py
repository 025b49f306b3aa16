# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Action inputs, pre-flight validation and resolved run options."""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict

from .catalog import Catalog
from .errors import InvalidConfiguration
from .models import INSTALL_ORDER, Tool
from .versioning import VersionResolver

GHC_VERSION_INPUT: Final[str] = "ghc-version"
CABAL_VERSION_INPUT: Final[str] = "cabal-version"
STACK_VERSION_INPUT: Final[str] = "stack-version"
STACK_NO_GLOBAL_INPUT: Final[str] = "stack-no-global"
STACK_SETUP_GHC_INPUT: Final[str] = "stack-setup-ghc"


def input_variable(name: str) -> str:
    """Return the environment variable carrying the action input ``name``."""

    return f"INPUT_{name.replace(' ', '_').upper()}"


class ActionInputs(BaseModel):
    """Raw, unvalidated inputs supplied to the action.

    Empty version strings mean "not supplied". The two flags are set by giving
    the input any non-empty value.
    """

    model_config = ConfigDict(frozen=True)

    ghc_version: str = ""
    cabal_version: str = ""
    stack_version: str = ""
    stack_no_global: bool = False
    stack_setup_ghc: bool = False

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> ActionInputs:
        """Read the inputs from ``INPUT_*`` variables of ``environ``."""

        env = os.environ if environ is None else environ

        def get_input(name: str) -> str:
            return env.get(input_variable(name), "").strip()

        return cls(
            ghc_version=get_input(GHC_VERSION_INPUT),
            cabal_version=get_input(CABAL_VERSION_INPUT),
            stack_version=get_input(STACK_VERSION_INPUT),
            stack_no_global=get_input(STACK_NO_GLOBAL_INPUT) != "",
            stack_setup_ghc=get_input(STACK_SETUP_GHC_INPUT) != "",
        )

    def with_overrides(self, **overrides: str | bool | None) -> ActionInputs:
        """Return a copy with every non-``None`` override applied."""

        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return self.model_validate({**self.model_dump(), **updates})


class ProgramOptions(BaseModel):
    """Resolved settings for one tool."""

    model_config = ConfigDict(frozen=True)

    enable: bool
    exact: str
    resolved: str | None


class StackOptions(ProgramOptions):
    """Stack settings, including whether stack should provision its own GHC."""

    setup: bool = False


class Options(BaseModel):
    """Validated options for a whole run."""

    model_config = ConfigDict(frozen=True)

    ghc: ProgramOptions
    cabal: ProgramOptions
    stack: StackOptions

    def for_tool(self, tool: Tool) -> ProgramOptions:
        entry: ProgramOptions = getattr(self, tool.value)
        return entry

    def enabled(self) -> Iterator[tuple[Tool, ProgramOptions]]:
        """Yield enabled tools in installation order."""

        for tool in INSTALL_ORDER:
            options = self.for_tool(tool)
            if options.enable:
                yield tool, options


def validate_inputs(inputs: ActionInputs) -> None:
    """Reject contradictory inputs before anything is installed.

    Raises:
        InvalidConfiguration: Listing every problem found.
    """

    problems: list[str] = []
    if inputs.stack_no_global and not inputs.stack_version:
        problems.append(f"{STACK_VERSION_INPUT} is required if {STACK_NO_GLOBAL_INPUT} is set")
    if inputs.stack_setup_ghc and not inputs.stack_version:
        problems.append(f"{STACK_VERSION_INPUT} is required if {STACK_SETUP_GHC_INPUT} is set")
    if problems:
        raise InvalidConfiguration(problems)


def build_options(inputs: ActionInputs, catalog: Catalog, resolver: VersionResolver | None = None) -> Options:
    """Validate ``inputs`` and resolve every requested version.

    Args:
        inputs: Raw action inputs.
        catalog: Supported-version catalog providing defaults.
        resolver: Resolver used for the run; a silent one is created when omitted.

    Returns:
        Options: Frozen options for the run.

    Raises:
        InvalidConfiguration: If the inputs are inconsistent.
    """

    validate_inputs(inputs)
    resolver = resolver or VersionResolver(catalog)

    ghc_exact = inputs.ghc_version or catalog.ghc.default
    cabal_exact = inputs.cabal_version or catalog.cabal.default
    stack_exact = inputs.stack_version
    global_enable = not inputs.stack_no_global

    return Options(
        ghc=ProgramOptions(
            enable=global_enable,
            exact=ghc_exact,
            resolved=resolver.resolve(Tool.GHC, ghc_exact),
        ),
        cabal=ProgramOptions(
            enable=global_enable,
            exact=cabal_exact,
            resolved=resolver.resolve(Tool.CABAL, cabal_exact),
        ),
        stack=StackOptions(
            enable=stack_exact != "",
            exact=stack_exact,
            resolved=resolver.resolve(Tool.STACK, stack_exact) if stack_exact else None,
            setup=inputs.stack_setup_ghc,
        ),
    )


__all__ = [
    "ActionInputs",
    "Options",
    "ProgramOptions",
    "StackOptions",
    "build_options",
    "input_variable",
    "validate_inputs",
]
