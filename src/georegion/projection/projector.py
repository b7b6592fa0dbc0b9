"""UTM projector backed by PROJ (via pyproj).

A projector is configured for exactly one zone and is built per operation:
callers construct it from the first relevant coordinate, push every point of
the operation through it in batches, then release it. Projectors are never
cached across operations because different operations may legitimately use
different zones.

The transform is the PROJ pipeline

    +proj=pipeline
    +step +proj=unitconvert +xy_in=deg +xy_out=rad
    +step +proj=utm +zone=<N> +ellps=WGS84

Note there is no ``+south``: southern-hemisphere northings are negative
rather than offset by the 10,000 km false northing.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from types import TracebackType
from typing import Self

import numpy as np
from pyproj import Transformer
from pyproj.enums import TransformDirection
from pyproj.exceptions import ProjError

from georegion.config import settings
from georegion.exceptions import NumericToleranceWarning, ProjectionError
from georegion.geometry.planar import PlanarPoint
from georegion.projection.zones import central_meridian, is_valid_zone, utm_zone
from georegion.utils.logging import get_logger

logger = get_logger(__name__)

_PIPELINE = (
    "+proj=pipeline "
    "+step +proj=unitconvert +xy_in=deg +xy_out=rad "
    "+step +proj=utm +zone={zone} +ellps=WGS84"
)


class UTMProjector:
    """Forward/inverse transform between WGS84 lon/lat and one UTM zone.

    Example:
        >>> with UTMProjector.for_coords(-122.0, 37.0) as projector:
        ...     easting, northing = projector.forward_coord(-122.0, 37.0)
    """

    def __init__(self, zone: int) -> None:
        """Build the PROJ transform for a zone.

        Args:
            zone: UTM zone number in 1..60.

        Raises:
            ProjectionError: If the zone is invalid or PROJ rejects the pipeline.
        """
        if not is_valid_zone(zone):
            raise ProjectionError("UTM zone must be in 1..60", zone=zone)
        self.zone = zone
        try:
            self._transformer: Transformer | None = Transformer.from_pipeline(
                _PIPELINE.format(zone=zone)
            )
        except ProjError as e:
            raise ProjectionError(f"could not build transform: {e}", zone=zone) from e
        logger.debug("Projector created", zone=zone)

    @classmethod
    def for_zone(cls, zone: int) -> Self:
        """Create a projector for an explicit UTM zone."""
        return cls(zone)

    @classmethod
    def for_coords(cls, lng: float, lat: float) -> Self:
        """Create a projector for the zone containing (lng, lat)."""
        return cls(utm_zone(lng, lat))

    @property
    def central_meridian(self) -> float:
        """Central meridian of the configured zone in degrees."""
        return central_meridian(self.zone)

    @property
    def closed(self) -> bool:
        return self._transformer is None

    def close(self) -> None:
        """Release the underlying PROJ transform."""
        self._transformer = None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"UTMProjector(zone={self.zone}, {state})"

    # ------------------------------------------------------------------
    # Scalar transforms
    # ------------------------------------------------------------------

    def forward_coord(self, lng: float, lat: float) -> tuple[float, float]:
        """Project a lon/lat pair (degrees) to easting/northing (meters)."""
        xs, ys = self._forward_arrays([lng], [lat])
        return float(xs[0]), float(ys[0])

    def inverse_coord(self, easting: float, northing: float) -> tuple[float, float]:
        """Unproject easting/northing (meters) to a lon/lat pair (degrees)."""
        lngs, lats = self._inverse_arrays([easting], [northing])
        return float(lngs[0]), float(lats[0])

    def forward(self, coord: Sequence[float]) -> PlanarPoint:
        """Project one (lng, lat) coordinate."""
        return PlanarPoint(*self.forward_coord(coord[0], coord[1]))

    def inverse(self, point: Sequence[float]) -> tuple[float, float]:
        """Unproject one planar point to (lng, lat)."""
        return self.inverse_coord(point[0], point[1])

    # ------------------------------------------------------------------
    # Batch transforms
    # ------------------------------------------------------------------

    def forward_many(self, coords: Iterable[Sequence[float]]) -> list[PlanarPoint]:
        """Project (lng, lat) coordinates element-wise, preserving order.

        Raises:
            ProjectionError: If any coordinate fails; no partial result
                is returned.
        """
        pairs = [(c[0], c[1]) for c in coords]
        if not pairs:
            return []
        lngs, lats = zip(*pairs, strict=True)
        xs, ys = self._forward_arrays(lngs, lats)
        return [PlanarPoint(float(x), float(y)) for x, y in zip(xs, ys, strict=True)]

    def inverse_many(self, points: Iterable[Sequence[float]]) -> list[tuple[float, float]]:
        """Unproject planar points element-wise to (lng, lat), preserving order."""
        pairs = [(p[0], p[1]) for p in points]
        if not pairs:
            return []
        xs, ys = zip(*pairs, strict=True)
        lngs, lats = self._inverse_arrays(xs, ys)
        return [(float(a), float(b)) for a, b in zip(lngs, lats, strict=True)]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_open(self) -> Transformer:
        if self._transformer is None:
            raise ProjectionError("projector is closed", zone=self.zone)
        return self._transformer

    def _forward_arrays(
        self, lngs: Sequence[float], lats: Sequence[float]
    ) -> tuple[np.ndarray, np.ndarray]:
        transformer = self._require_open()
        lng_arr = np.asarray(lngs, dtype=float)
        lat_arr = np.asarray(lats, dtype=float)

        for lng, lat in zip(lng_arr, lat_arr, strict=True):
            if not (math.isfinite(lng) and math.isfinite(lat)):
                raise ProjectionError(
                    "coordinate is not finite",
                    zone=self.zone,
                    coord=(float(lng), float(lat)),
                )
            if abs(lat) >= 90.0 or abs(lng) > 180.0:
                raise ProjectionError(
                    "coordinate outside projection domain",
                    zone=self.zone,
                    coord=(float(lng), float(lat)),
                )

        xs, ys = self._transform(transformer, lng_arr, lat_arr, TransformDirection.FORWARD)
        bad = ~(np.isfinite(xs) & np.isfinite(ys))
        if bad.any():
            i = int(np.argmax(bad))
            raise ProjectionError(
                "forward projection produced a non-finite result",
                zone=self.zone,
                coord=(float(lng_arr[i]), float(lat_arr[i])),
            )

        if settings.CHECK_ROUNDTRIP:
            self._check_roundtrip(lng_arr, lat_arr, xs, ys)
        return xs, ys

    def _inverse_arrays(
        self, xs: Sequence[float], ys: Sequence[float]
    ) -> tuple[np.ndarray, np.ndarray]:
        transformer = self._require_open()
        x_arr = np.asarray(xs, dtype=float)
        y_arr = np.asarray(ys, dtype=float)

        bad = ~(np.isfinite(x_arr) & np.isfinite(y_arr))
        if bad.any():
            i = int(np.argmax(bad))
            raise ProjectionError(
                "planar point is not finite",
                zone=self.zone,
                coord=(float(x_arr[i]), float(y_arr[i])),
            )

        lngs, lats = self._transform(transformer, x_arr, y_arr, TransformDirection.INVERSE)
        bad = ~(np.isfinite(lngs) & np.isfinite(lats))
        if bad.any():
            i = int(np.argmax(bad))
            raise ProjectionError(
                "inverse projection produced a non-finite result",
                zone=self.zone,
                coord=(float(x_arr[i]), float(y_arr[i])),
            )
        return lngs, lats

    def _transform(
        self,
        transformer: Transformer,
        a: np.ndarray,
        b: np.ndarray,
        direction: TransformDirection,
    ) -> tuple[np.ndarray, np.ndarray]:
        try:
            out_a, out_b = transformer.transform(a, b, errcheck=True, direction=direction)
        except ProjError as e:
            raise ProjectionError(f"PROJ transform failed: {e}", zone=self.zone) from e
        return np.asarray(out_a, dtype=float), np.asarray(out_b, dtype=float)

    def _check_roundtrip(
        self,
        lngs: np.ndarray,
        lats: np.ndarray,
        xs: np.ndarray,
        ys: np.ndarray,
    ) -> None:
        back_lngs, back_lats = self._transform(
            self._require_open(), xs, ys, TransformDirection.INVERSE
        )
        error = float(
            max(np.max(np.abs(back_lngs - lngs)), np.max(np.abs(back_lats - lats)))
        )
        if error > settings.ROUNDTRIP_TOLERANCE_DEG:
            logger.warning(
                "Projection round-trip exceeds tolerance",
                category=NumericToleranceWarning.__name__,
                error_deg=error,
                tolerance_deg=settings.ROUNDTRIP_TOLERANCE_DEG,
                central_meridian=self.central_meridian,
            )
