# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Sequence a complete setup run: install tools, then configure them."""

from __future__ import annotations

from .actions import ActionsRuntime
from .cabal_config import configure_cabal
from .catalog import Catalog
from .config import ActionInputs, Options, build_options
from .environment import EnvironmentContext
from .installer import ToolInstaller
from .models import InstallLocation, Platform, Tool
from .process_utils import run_command
from .versioning import VersionResolver


def run_setup(
    options: Options,
    *,
    installer: ToolInstaller,
    runtime: ActionsRuntime,
) -> dict[Tool, InstallLocation]:
    """Install every enabled tool in order and apply post-install configuration.

    Tools are handled strictly one after another; any failure propagates
    immediately and nothing already installed is rolled back.
    """

    locations: dict[Tool, InstallLocation] = {}
    for tool, program in options.enabled():
        version = program.resolved or program.exact
        with runtime.group(f"Installing {tool} version {version}"):
            locations[tool] = installer.install(tool, version)

    if options.stack.setup:
        ghc_version = options.ghc.resolved or options.ghc.exact
        with runtime.group("Pre-installing GHC with stack"):
            run_command(["stack", "setup", ghc_version])

    if options.cabal.enable:
        with runtime.group("Setting up cabal"):
            configure_cabal(
                runtime=runtime,
                platform=installer.platform,
                home=runtime.context.home,
                update_index=not options.stack.enable,
            )
    return locations


def setup(
    inputs: ActionInputs,
    *,
    catalog: Catalog,
    context: EnvironmentContext,
    runtime: ActionsRuntime,
    platform: Platform,
) -> dict[Tool, InstallLocation]:
    """Validate ``inputs``, resolve versions and run the whole setup."""

    runtime.info("Preparing to setup a Haskell environment")
    resolver = VersionResolver(catalog, report=runtime.info)
    options = build_options(inputs, catalog, resolver)
    installer = ToolInstaller.create(context=context, runtime=runtime, platform=platform)
    return run_setup(options, installer=installer, runtime=runtime)


__all__ = ["run_setup", "setup"]
