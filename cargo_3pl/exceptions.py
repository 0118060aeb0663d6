"""Custom exceptions for cargo-3pl."""


class ThirdPartyError(Exception):
    """Base exception for all fatal cargo-3pl errors."""


class MetadataError(ThirdPartyError):
    """Raised when the package metadata cannot be obtained."""


class MetadataCommandError(MetadataError):
    """Raised when ``cargo metadata`` cannot be run or exits non-zero."""


class MetadataParseError(MetadataError):
    """Raised when the metadata document is not valid JSON or lacks a required field."""


class NoDependenciesError(ThirdPartyError):
    """Raised when the project has no third-party dependencies."""

    def __init__(self) -> None:
        super().__init__("No dependencies")


class MissingLicenseFilesError(ThirdPartyError):
    """Raised in strict mode when a dependency has no license files."""

    def __init__(self, packages: list[str]):
        self.packages = packages
        super().__init__("Exiting due to missing license files")


class ReportError(ThirdPartyError):
    """Raised when a license file cannot be read while writing the report."""
