"""Custom exceptions for georegion operations.

Errors are deterministic input errors: they abort the single operation that
raised them and are never retried. Both fatal error types carry the
coordinate or operation context that produced them.
"""


class GeoRegionError(Exception):
    """Base exception for all georegion errors."""

    def __init__(self, message: str) -> None:
        """Initialize the error.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return self.message


class ProjectionError(GeoRegionError):
    """Raised when a coordinate cannot be transformed under a UTM zone.

    This error is raised when:
    - The zone number is outside 1..60
    - The input coordinate is non-finite or at a pole
    - PROJ rejects the coordinate or returns a non-finite result
    """

    def __init__(
        self,
        message: str,
        *,
        zone: int | None = None,
        coord: tuple[float, float] | None = None,
    ) -> None:
        """Initialize projection error with transform context.

        Args:
            message: Human-readable error description.
            zone: UTM zone the transform was configured for.
            coord: Offending input coordinate, (lng, lat) for forward
                transforms or (easting, northing) for inverse ones.
        """
        self.zone = zone
        self.coord = coord
        super().__init__(message)

    def _format_message(self) -> str:
        parts = [self.message]
        if self.zone is not None:
            parts.append(f"zone={self.zone}")
        if self.coord is not None:
            parts.append(f"coord={self.coord}")

        if len(parts) == 1:
            return parts[0]
        return f"{parts[0]} ({', '.join(parts[1:])})"


class GeometryPreconditionError(GeoRegionError):
    """Raised when geometry input violates an operation's preconditions.

    This error is raised when:
    - A ring has fewer than 3 distinct vertices or zero area
    - A radius or segment count is out of range
    - Union operands are disjoint (no single-ring result exists)
    - An intersection splits into several disjoint pieces
    """

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        """Initialize precondition error.

        Args:
            message: Human-readable error description.
            operation: Name of the kernel or model operation that failed.
        """
        self.operation = operation
        super().__init__(message)

    def _format_message(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message


class NumericToleranceWarning(UserWarning):
    """Projection round-trip or hull degeneracy exceeded expected tolerance.

    Only ever logged; never aborts an operation.
    """
