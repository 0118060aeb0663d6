"""Report assembler — turn resolved packages into ordered report sections."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Callable

from cargo_3pl.exceptions import ReportError
from cargo_3pl.models import LicenseFile, ResolvedPackage

RULE = "=" * 80


@dataclass(frozen=True)
class Section:
    """One delimited block of the report.

    The summary section carries text ``lines``; license sections carry the
    ``license_file`` whose bytes follow the header.
    """

    header: str
    lines: tuple[str, ...] = ()
    license_file: LicenseFile | None = None


def render(packages: list[ResolvedPackage]) -> list[Section]:
    """Build the summary section followed by one section per license file."""
    summary: list[str] = []
    for package in packages:
        summary.append("")
        summary.append(package.display_name)
        if package.url:
            summary.append(package.url)
        if package.license:
            summary.append(package.license)

    sections = [Section(header="Summary", lines=tuple(summary))]
    for package in packages:
        for license_file in package.license_files:
            sections.append(
                Section(
                    header=f"{package.display_name} {license_file.relative_path}",
                    license_file=license_file,
                )
            )
    return sections


def _encode(text: str) -> bytes:
    """Encode report text, restoring undecodable filename bytes as-is."""
    try:
        return text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        # Lone surrogates that did not come from the filesystem (e.g. JSON escapes)
        return text.encode("utf-8", "replace")


def _header(text: str) -> bytes:
    return _encode(f"{RULE}\n{text}\n{RULE}\n")


def write_report(
    sections: list[Section],
    stream: BinaryIO,
    read_bytes: Callable[[Path], bytes] = Path.read_bytes,
) -> None:
    """Write *sections* to a binary *stream*.

    License file contents are copied verbatim; a trailing newline is added
    when the file lacks one so the next header starts on its own line.
    All files are read before the first byte is written.
    """
    contents: dict[Path, bytes] = {}
    for section in sections:
        if section.license_file is None or section.license_file.path in contents:
            continue
        try:
            contents[section.license_file.path] = read_bytes(section.license_file.path)
        except OSError as e:
            raise ReportError(f"cannot read {section.license_file.path}: {e}") from e

    for section in sections:
        if section.license_file is None:
            stream.write(_header(section.header))
            for line in section.lines:
                stream.write(_encode(f"{line}\n"))
            continue

        content = contents[section.license_file.path]
        stream.write(b"\n")
        stream.write(_header(section.header))
        stream.write(b"\n")
        stream.write(content)
        if content and not content.endswith(b"\n"):
            stream.write(b"\n")
    stream.flush()
