"""End-to-end pipeline: query, resolve, audit, then write the report."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, Callable

import structlog

from cargo_3pl.config import ReportOptions
from cargo_3pl.exceptions import MissingLicenseFilesError, NoDependenciesError
from cargo_3pl.metadata import MetadataSource
from cargo_3pl.models import ResolvedPackage
from cargo_3pl.report import render, write_report
from cargo_3pl.resolver import resolve

log = structlog.get_logger("cargo_3pl.runner")


@dataclass
class Audit:
    """Warnings collected for a set of resolved packages."""

    warnings: list[str] = field(default_factory=list)
    missing_files: list[str] = field(default_factory=list)


def audit(packages: list[ResolvedPackage], show_url: bool = False) -> Audit:
    """Collect warnings for missing license fields and missing license files.

    All "No license field" warnings come before any "No license files" one.
    """
    result = Audit()
    for package in packages:
        if package.license is None:
            result.warnings.append(f"No license field: {package.full_name}")

    for package in packages:
        if not package.license_files:
            suffix = f" ({package.url})" if show_url and package.url else ""
            result.warnings.append(f"No license files found: {package.full_name}{suffix}")
            result.missing_files.append(package.full_name)
    return result


def generate_report(
    source: MetadataSource,
    options: ReportOptions,
    stdout: BinaryIO,
    warn: Callable[[str], None],
) -> list[ResolvedPackage]:
    """Run the whole pipeline and write the report to *stdout*.

    Warnings are passed to *warn* one at a time.  Every fatal condition is
    raised as a :class:`~cargo_3pl.exceptions.ThirdPartyError` before
    anything is written.
    """
    deps = source.query(options.metadata)
    packages = resolve(deps, source=options.source)
    if not packages:
        raise NoDependenciesError()

    result = audit(packages, show_url=options.show_url)
    for message in result.warnings:
        warn(message)
    if options.require_files and result.missing_files:
        raise MissingLicenseFilesError(result.missing_files)

    sections = render(packages)
    log.debug("runner.render", packages=len(packages), sections=len(sections))
    write_report(sections, stdout)
    return packages
