"""cargo-3pl: Report third-party dependency licenses of a Cargo project."""

__version__ = "0.1.0"

from cargo_3pl.exceptions import ThirdPartyError
from cargo_3pl.matcher import is_license_filename
from cargo_3pl.metadata import CargoMetadataSource, MetadataOptions, MetadataSource
from cargo_3pl.models import DependencyDescriptor, LicenseFile, ResolvedPackage
from cargo_3pl.report import Section, render, write_report
from cargo_3pl.resolver import resolve
from cargo_3pl.scanner import scan

__all__ = [
    "CargoMetadataSource",
    "DependencyDescriptor",
    "LicenseFile",
    "MetadataOptions",
    "MetadataSource",
    "ResolvedPackage",
    "Section",
    "ThirdPartyError",
    "is_license_filename",
    "render",
    "resolve",
    "scan",
    "write_report",
]
