"""Projector lifecycle for one model operation.

Each operation selects its zone from a single anchor coordinate (the first
vertex of its first operand), pushes every operand through that one
projector, and releases it when done. The anchor-based zone choice is the
zone selection policy: operands far from the anchor are projected into the
same zone regardless and accumulate distortion.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from georegion.projection import UTMProjector, utm_zone
from georegion.utils.logging import get_logger, operation_context

logger = get_logger(__name__)


@contextmanager
def projected(operation: str, anchor: tuple[float, float]) -> Iterator[UTMProjector]:
    """Open a projector for the anchor's zone for the duration of a block.

    Args:
        operation: Operation name reported in log events.
        anchor: (lng, lat) coordinate that selects the zone.

    Yields:
        A UTMProjector, closed when the block exits.
    """
    zone = utm_zone(*anchor)
    with operation_context(operation, zone):
        projector = UTMProjector.for_zone(zone)
        try:
            logger.debug("Operation started", anchor=anchor)
            yield projector
        except Exception:
            logger.debug("Operation failed", exc_info=True)
            raise
        finally:
            projector.close()
