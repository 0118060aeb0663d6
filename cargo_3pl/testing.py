"""Test doubles for cargo_3pl.

Usage::

    from cargo_3pl.testing import FakeMetadataSource

    source = FakeMetadataSource([DependencyDescriptor(...)])
    generate_report(source, ReportOptions(), stdout, warn)
"""

from __future__ import annotations

from cargo_3pl.metadata import MetadataOptions
from cargo_3pl.models import DependencyDescriptor


class FakeMetadataSource:
    """MetadataSource returning canned descriptors instead of running cargo.

    Every call to :meth:`query` is recorded in ``queries``.
    """

    def __init__(self, deps: list[DependencyDescriptor]) -> None:
        self.deps = deps
        self.queries: list[MetadataOptions] = []

    def query(self, options: MetadataOptions) -> list[DependencyDescriptor]:
        self.queries.append(options)
        return list(self.deps)
