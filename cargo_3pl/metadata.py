"""Metadata adapter — query ``cargo metadata`` and extract dependency descriptors."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import structlog

from cargo_3pl.exceptions import MetadataCommandError, MetadataParseError
from cargo_3pl.models import DependencyDescriptor

log = structlog.get_logger("cargo_3pl.metadata")

_TARGET_SPEC_ERROR = "Error loading target specification: "


@dataclass(frozen=True)
class MetadataOptions:
    """Feature and platform selection forwarded to ``cargo metadata``."""

    features: tuple[str, ...] = ()
    all_features: bool = False
    no_default_features: bool = False
    targets: tuple[str, ...] = ()


@runtime_checkable
class MetadataSource(Protocol):
    """Anything that can produce the third-party dependency list."""

    def query(self, options: MetadataOptions) -> list[DependencyDescriptor]: ...


def build_command(options: MetadataOptions, cargo: str = "cargo") -> list[str]:
    """Translate *options* into a ``cargo metadata`` argument list."""
    cmd = [cargo, "metadata", "--format-version", "1"]
    for feature in options.features:
        cmd += ["--features", feature]
    if options.all_features:
        cmd.append("--all-features")
    if options.no_default_features:
        cmd.append("--no-default-features")
    for target in options.targets:
        cmd += ["--filter-platform", target]
    return cmd


def command_error_message(stderr: str) -> str:
    """Reduce a failed ``cargo metadata`` stderr to the message worth showing."""
    for line in stderr.splitlines():
        if _TARGET_SPEC_ERROR in line:
            return line.split(_TARGET_SPEC_ERROR)[-1]
    return f"cargo metadata failed\n{stderr}"


def _required_str(obj: dict[str, Any], key: str, where: str) -> str:
    value = obj.get(key)
    if not isinstance(value, str):
        raise MetadataParseError(f"missing or invalid '{key}' in {where}")
    return value


def _optional_str(obj: dict[str, Any], key: str) -> str | None:
    value = obj.get(key)
    return value if isinstance(value, str) else None


def is_workspace_member(manifest_path: Path, workspace_root: Path) -> bool:
    """True if the package is part of the queried project rather than a dependency.

    Anything under the workspace root, path dependencies included, is
    first-party.  The test is component-wise, so ``/work/app-extras`` is not
    under ``/work/app``.
    """
    return manifest_path.is_relative_to(workspace_root)


def parse_metadata(document: Any) -> list[DependencyDescriptor]:
    """Extract third-party dependencies from a parsed metadata document.

    Packages whose manifest lives under ``workspace_root`` are the
    project's own crates and are dropped.
    """
    if not isinstance(document, dict):
        raise MetadataParseError("metadata document is not a JSON object")
    workspace_root = Path(_required_str(document, "workspace_root", "metadata"))
    packages = document.get("packages")
    if not isinstance(packages, list):
        raise MetadataParseError("missing or invalid 'packages' in metadata")

    deps: list[DependencyDescriptor] = []
    for index, package in enumerate(packages):
        if not isinstance(package, dict):
            raise MetadataParseError(f"package #{index} is not a JSON object")
        where = f"package #{index}"
        name = _required_str(package, "name", where)
        version = _required_str(package, "version", where)
        manifest_path = Path(_required_str(package, "manifest_path", where))

        if is_workspace_member(manifest_path, workspace_root):
            log.debug("metadata.workspace_member", name=name, version=version)
            continue

        deps.append(
            DependencyDescriptor(
                name=name,
                version=version,
                source_dir=manifest_path.parent,
                license=_optional_str(package, "license"),
                license_file=_optional_str(package, "license_file"),
                url=_optional_str(package, "homepage") or _optional_str(package, "repository"),
            )
        )
    return deps


class CargoMetadataSource:
    """Run ``cargo metadata`` in a subprocess and parse its output."""

    def __init__(self, cargo: str | None = None, cwd: Path | None = None) -> None:
        # cargo exports CARGO to the subcommands it runs
        self._cargo = cargo or os.environ.get("CARGO", "cargo")
        self._cwd = cwd

    def query(self, options: MetadataOptions) -> list[DependencyDescriptor]:
        cmd = build_command(options, self._cargo)
        log.debug("metadata.query", cmd=cmd)
        try:
            proc = subprocess.run(cmd, capture_output=True, cwd=self._cwd)
        except OSError as e:
            raise MetadataCommandError(f"failed to run {self._cargo}: {e}") from e

        if proc.returncode != 0:
            stderr = proc.stderr.decode("utf-8", errors="replace")
            raise MetadataCommandError(command_error_message(stderr))

        # ValueError covers both malformed JSON and stdout that is not UTF-8
        try:
            document = json.loads(proc.stdout)
        except ValueError as e:
            raise MetadataParseError(f"invalid cargo metadata output: {e}") from e

        deps = parse_metadata(document)
        log.debug("metadata.parsed", dependencies=len(deps))
        return deps
