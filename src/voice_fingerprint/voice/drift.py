"""
Drift Detector

Compares one new sample against an active VoicePrint and reports every
tracked metric that left its threshold band.
"""

import logging
from datetime import datetime

from voice_fingerprint.errors import ProfileNotActive
from voice_fingerprint.models.records import DriftEvent
from voice_fingerprint.style.signatures import TRACKED_METRICS, SampleMetrics

from .profile import VoicePrint
from .scoring import drift_severity, relative_change

logger = logging.getLogger(__name__)


class DriftDetector:
    """
    Stateless drift check.

    The caller supplies the timestamp, so two calls with the same sample and
    profile return equal event lists.
    """

    def detect(self, metrics: SampleMetrics, voiceprint: VoicePrint, timestamp: datetime) -> list[DriftEvent]:
        """
        Emit one DriftEvent per metric outside its band, in TRACKED_METRICS order.

        Raises:
            ProfileNotActive: the VoicePrint is computing or stale
        """
        if not voiceprint.is_active:
            raise ProfileNotActive(
                f"Profile {voiceprint.id} is {voiceprint.status.value}; drift needs an active profile",
                sample_id=metrics.sample_id or None,
            )

        events = []
        for name, spec in TRACKED_METRICS.items():
            band = voiceprint.thresholds.get(name)
            if band is None:
                continue
            value = spec.getter(metrics)
            if band.contains(value):
                continue

            change = relative_change(value, band.optimal, spec.scale)
            direction = "above" if value > band.optimal else "below"
            events.append(DriftEvent(
                dimension=spec.dimension.value,
                metric=name,
                change_percent=round(change, 2),
                timestamp=timestamp,
                description=(
                    f"{spec.label} is {abs(change):.1f}% {direction} your usual "
                    f"{band.optimal:.3g} (band {band.min:.3g}-{band.max:.3g})"
                ),
                severity=drift_severity(change),
            ))

        logger.info(
            "Drift check for %s against %s: %d events",
            metrics.sample_id or "<text>", voiceprint.id, len(events),
        )
        return events
