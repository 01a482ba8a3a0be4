"""
Scoring Formulas

Every coefficient the aggregator and drift detector rely on, as named pure
functions. Callers never embed their own weights or cutoffs.
"""

import math

from voice_fingerprint.models.records import DriftSeverity, ThresholdBand
from voice_fingerprint.style.signatures import MetricSpec

# Confidence
SAMPLE_WEIGHT = 0.4
CONSISTENCY_WEIGHT = 0.6
SAMPLE_SATURATION_RATE = 3.0   # samples per e-fold of the count term
PRE_OPTIMAL_CEILING = 0.95     # cap below the optimal sample count
DEGRADED_PENALTY = 0.5         # confidence lost if every dimension were degraded

# Threshold bands: relative half-width at zero and full confidence
MAX_BAND_TOLERANCE = 0.35
MIN_BAND_TOLERANCE = 0.05      # stays below MINOR_DRIFT_LIMIT / 100
BAND_FLOOR_FRACTION = 0.25     # of the metric scale, for optimal values near zero

# Drift
RELATIVE_CHANGE_FLOOR = 0.05   # of the metric scale, as the smallest denominator
MINOR_DRIFT_LIMIT = 10.0       # percent
MAJOR_DRIFT_LIMIT = 20.0       # percent


def clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))


def weighted_mean(values: list[float], weights: list[float]) -> float:
    """Mean of ``values`` weighted by ``weights`` (exactly rounded sums)."""
    total = math.fsum(weights)
    if total <= 0:
        return math.fsum(values) / len(values) if values else 0.0
    return math.fsum(v * w for v, w in zip(values, weights)) / total


def normalized_std_dev(values: list[float], scale: float) -> float:
    """
    Upper bound on the population std-dev, in units of the metric's scale.

    Half the observed range bounds the std-dev of any values inside it, and
    unlike the std-dev itself it never grows when a value inside the range
    is added.
    """
    if len(values) < 2 or scale <= 0:
        return 0.0
    return (max(values) - min(values)) / 2 / scale


def metric_consistency(values: list[float], scale: float) -> float:
    """1 - normalized std-dev, clamped to [0, 1]."""
    return clamp01(1.0 - normalized_std_dev(values, scale))


def consistency_score(values_by_metric: dict[str, list[float]], scales: dict[str, float]) -> float:
    """Average per-metric consistency across tracked metrics."""
    if not values_by_metric:
        return 1.0
    per_metric = [metric_consistency(values, scales[name]) for name, values in values_by_metric.items()]
    return clamp01(math.fsum(per_metric) / len(per_metric))


def sample_saturation(sample_count: int) -> float:
    """Saturating credit for sample count: 0 at none, approaching 1."""
    if sample_count <= 0:
        return 0.0
    return 1.0 - math.exp(-sample_count / SAMPLE_SATURATION_RATE)


def confidence_ceiling(sample_count: int, optimal_samples: int = 5) -> float:
    """Highest confidence a profile built from ``sample_count`` samples may report."""
    return PRE_OPTIMAL_CEILING if sample_count < optimal_samples else 1.0


def confidence_score(
    sample_count: int,
    consistency: float,
    degraded_fraction: float = 0.0,
    optimal_samples: int = 5,
) -> float:
    """
    Confidence in a profile, in [0, 1].

    Non-decreasing in sample count for fixed consistency and in consistency
    for fixed sample count. Below ``optimal_samples`` it never exceeds
    PRE_OPTIMAL_CEILING.
    """
    if sample_count <= 0:
        return 0.0
    raw = SAMPLE_WEIGHT * sample_saturation(sample_count) + CONSISTENCY_WEIGHT * clamp01(consistency)
    raw *= 1.0 - DEGRADED_PENALTY * clamp01(degraded_fraction)
    return clamp01(min(raw, confidence_ceiling(sample_count, optimal_samples)))


def band_tolerance(confidence: float) -> float:
    """Relative half-width of a threshold band; shrinks as confidence rises."""
    return MAX_BAND_TOLERANCE - (MAX_BAND_TOLERANCE - MIN_BAND_TOLERANCE) * clamp01(confidence)


def threshold_band(spec: MetricSpec, optimal: float, confidence: float) -> ThresholdBand:
    """Band around ``optimal``; min <= optimal <= max holds for any finite input."""
    if not math.isfinite(optimal):
        raise ValueError(f"{spec.name}: cannot build a band around {optimal}")
    optimal = spec.clamp(optimal)
    tolerance = band_tolerance(confidence)
    half_width = max(abs(optimal) * tolerance, spec.scale * tolerance * BAND_FLOOR_FRACTION)
    return ThresholdBand(
        metric_name=spec.name,
        min=spec.clamp(optimal - half_width),
        max=spec.clamp(optimal + half_width),
        optimal=optimal,
    )


def relative_change(value: float, optimal: float, scale: float) -> float:
    """Signed percent change of ``value`` from ``optimal``."""
    denominator = max(abs(optimal), scale * RELATIVE_CHANGE_FLOOR)
    return (value - optimal) / denominator * 100.0


def drift_severity(change_percent: float) -> DriftSeverity:
    """minor below 10%, moderate from 10% to 20%, major above 20%."""
    magnitude = abs(change_percent)
    if magnitude < MINOR_DRIFT_LIMIT:
        return DriftSeverity.MINOR
    if magnitude <= MAJOR_DRIFT_LIMIT:
        return DriftSeverity.MODERATE
    return DriftSeverity.MAJOR
