"""Infrastructure layer - report formatting and JSON export."""

from roomchain.infrastructure.formatters import (
    GeometryJsonExporter,
    PlacementFormatter,
    VerificationFormatter,
    WallChainReportFormatter,
)

__all__ = [
    "GeometryJsonExporter",
    "PlacementFormatter",
    "VerificationFormatter",
    "WallChainReportFormatter",
]
