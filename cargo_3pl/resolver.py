"""Package resolver — attach license files to each dependency."""

from __future__ import annotations

from collections import Counter
from dataclasses import replace
from pathlib import Path

import structlog

from cargo_3pl.models import DependencyDescriptor, LicenseFile, ResolvedPackage
from cargo_3pl.scanner import scan

log = structlog.get_logger("cargo_3pl.resolver")


def find_license_files(dep: DependencyDescriptor, source: Path | None = None) -> list[LicenseFile]:
    """Collect the license files for a single dependency.

    Scan results come first, sorted by path.  The manifest's declared
    ``license-file`` is appended after them when the scan did not already
    find it; it is *not* merged back into sorted order.  Files from the
    ``source`` override directory (``<source>/<name>-<version>``) go last.
    """
    root = dep.source_dir
    files = [LicenseFile.from_root(p, root) for p in scan(root)]
    seen = {f.path for f in files}

    if dep.license_file:
        hint = root / dep.license_file
        if hint not in seen:
            # An absolute license-file replaces root in the join
            rel = hint.relative_to(root) if hint.is_relative_to(root) else hint
            files.append(LicenseFile(path=hint, relative_path=str(rel)))
            seen.add(hint)

    if source is not None:
        extra_root = Path(source) / f"{dep.name}-{dep.version}"
        for p in scan(extra_root, match_all=True):
            if p not in seen:
                files.append(LicenseFile.from_root(p, extra_root))
                seen.add(p)

    return files


def resolve(
    deps: list[DependencyDescriptor],
    *,
    source: Path | None = None,
) -> list[ResolvedPackage]:
    """Resolve license files for *deps*, preserving their order.

    ``multiple_versions`` is set on every package whose name occurs more
    than once in the whole set.
    """
    packages: list[ResolvedPackage] = []
    keys: set[tuple[str, str]] = set()
    for dep in deps:
        # The same name and version can come from two sources (registry and git)
        if (dep.name, dep.version) in keys:
            log.debug("resolver.duplicate_skipped", package=dep.full_name)
            continue
        keys.add((dep.name, dep.version))
        files = find_license_files(dep, source)
        log.debug("resolver.package", package=dep.full_name, license_files=len(files))
        packages.append(
            ResolvedPackage(
                name=dep.name,
                version=dep.version,
                source_dir=dep.source_dir,
                license=dep.license,
                license_file=dep.license_file,
                url=dep.url,
                license_files=tuple(files),
            )
        )

    counts = Counter(p.name for p in packages)
    return [replace(p, multiple_versions=counts[p.name] > 1) for p in packages]
