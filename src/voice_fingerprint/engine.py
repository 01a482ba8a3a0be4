"""
Voice Engine

Stateless service facade over the analyzers, the aggregator, the drift
detector and the summarizer. Construct one per call or inject it; it holds
settings only.
"""

import logging
import threading
import time
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from voice_fingerprint.config import Settings, get_settings
from voice_fingerprint.errors import AnalysisCancelled, InsufficientSamples, SampleTooLong
from voice_fingerprint.ingest.tokenizer import TokenizedText
from voice_fingerprint.models.records import DriftEvent, VoiceEvolution
from voice_fingerprint.models.sample import WritingSample
from voice_fingerprint.style.analyzer import SampleAnalyzer
from voice_fingerprint.style.signatures import SampleMetrics
from voice_fingerprint.voice.aggregator import AggregationProgress, FingerprintAggregator
from voice_fingerprint.voice.compare import compare_voices, detect_evolution
from voice_fingerprint.voice.drift import DriftDetector
from voice_fingerprint.voice.profile import ProfileStatus, VoicePrint
from voice_fingerprint.voice.traits import VoiceSummary, summarize

logger = logging.getLogger(__name__)

# How often the join loop re-checks the cancel event, in seconds
POLL_INTERVAL = 0.05


class VoiceEngine:
    """
    Entry point for building and using voice profiles.

    Usage:
        engine = VoiceEngine()
        voiceprint = engine.create_voiceprint(samples, user_id="u-1")
        events = engine.detect_drift(new_text, voiceprint, timestamp=now)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        progress_callback: Optional[Callable[[AggregationProgress], None]] = None,
    ):
        self.settings = settings or get_settings()
        self.progress_callback = progress_callback
        self.analyzer = SampleAnalyzer(
            min_words=self.settings.min_sample_words,
            max_words=self.settings.max_sample_words,
        )

    def _report_progress(self, current: int, total: int, message: str = ""):
        if self.progress_callback:
            self.progress_callback(AggregationProgress(ProfileStatus.COMPUTING.value, current, total, message))

    # === Per-sample analysis ===

    def analyze_text(self, text: str, sample_id: str = "") -> SampleMetrics:
        return self.analyzer.analyze_text(text, sample_id=sample_id)

    def analyze_sample(self, sample: WritingSample) -> SampleMetrics:
        return self.analyzer.analyze_sample(sample)

    # === Profile creation ===

    def create_voiceprint(
        self,
        samples: list[WritingSample],
        user_id: str,
        analyzed_at: Optional[datetime] = None,
        cancel_event: Optional[threading.Event] = None,
        timeout: Optional[float] = None,
        previous: Optional[VoicePrint] = None,
    ) -> VoicePrint:
        """
        Build an active VoicePrint from writing samples.

        Every sample is validated before any analysis starts. Analysis then
        fans out across worker threads and joins before aggregation; nothing
        is returned unless every sample finished.

        Args:
            samples: the user's writing samples
            user_id: owner of the profile
            analyzed_at: timestamp recorded on the profile (defaults to now, UTC)
            cancel_event: set it to abandon the run
            timeout: seconds before the run is abandoned (defaults to settings)
            previous: profile being rebuilt

        Raises:
            SampleTooShort, SampleTooLong, DegenerateText, EncodingError:
                a sample failed validation
            InsufficientSamples: fewer than ``min_samples`` samples
            AnalysisCancelled: cancelled or timed out before the join
        """
        if not samples:
            raise InsufficientSamples("No samples supplied; refusing to build a profile")

        tokens = [self.analyzer.tokenize(s.content, sample_id=s.id) for s in samples]

        total_words = sum(t.word_count for t in tokens)
        if total_words > self.settings.max_total_words:
            raise SampleTooLong(
                f"{total_words} words submitted; the limit per profile is {self.settings.max_total_words}"
            )
        if len(samples) < self.settings.min_samples:
            raise InsufficientSamples(
                f"{len(samples)} valid samples supplied; at least {self.settings.min_samples} required"
            )

        logger.info("Analyzing %d samples (%d words) for %s", len(samples), total_words, user_id)
        metrics = self._analyze_all(
            samples,
            tokens,
            cancel_event=cancel_event,
            timeout=self.settings.analysis_timeout if timeout is None else timeout,
        )

        aggregator = FingerprintAggregator(
            min_samples=self.settings.min_samples,
            optimal_samples=self.settings.optimal_samples,
            progress_callback=self.progress_callback,
        )
        return aggregator.aggregate(metrics, user_id=user_id, analyzed_at=analyzed_at, previous=previous)

    def rebuild_voiceprint(
        self,
        previous: VoicePrint,
        samples: list[WritingSample],
        analyzed_at: Optional[datetime] = None,
        cancel_event: Optional[threading.Event] = None,
        timeout: Optional[float] = None,
    ) -> VoicePrint:
        """Build the next version of ``previous`` from a fresh sample set."""
        return self.create_voiceprint(
            samples,
            user_id=previous.user_id,
            analyzed_at=analyzed_at,
            cancel_event=cancel_event,
            timeout=timeout,
            previous=previous,
        )

    def _analyze_all(
        self,
        samples: list[WritingSample],
        tokens: list[TokenizedText],
        cancel_event: Optional[threading.Event],
        timeout: Optional[float],
    ) -> list[SampleMetrics]:
        """Fan out per-sample analysis and wait for every result."""
        deadline = time.monotonic() + timeout if timeout else None
        executor = ThreadPoolExecutor(max_workers=self.settings.max_workers)
        try:
            pending: set[Future] = {
                executor.submit(self.analyzer.analyze_tokens, tok, sample.id)
                for sample, tok in zip(samples, tokens)
            }
            results: list[SampleMetrics] = []
            while pending:
                if cancel_event is not None and cancel_event.is_set():
                    raise AnalysisCancelled("Profile creation cancelled before aggregation")
                wait_for = POLL_INTERVAL
                if deadline is not None:
                    remaining = deadline - time.monotonic()
                    if remaining <= 0:
                        raise AnalysisCancelled(f"Profile creation timed out after {timeout:g}s")
                    wait_for = min(wait_for, remaining)
                done, pending = wait(pending, timeout=wait_for, return_when=FIRST_COMPLETED)
                for future in done:
                    results.append(future.result())
                    self._report_progress(len(results), len(samples), "Analyzed sample")
            if cancel_event is not None and cancel_event.is_set():
                raise AnalysisCancelled("Profile creation cancelled before aggregation")
            return results
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    # === Using a profile ===

    def detect_drift(
        self,
        text_or_metrics: str | SampleMetrics,
        voiceprint: VoicePrint,
        timestamp: datetime,
        sample_id: str = "",
    ) -> list[DriftEvent]:
        """Analyze new writing (if given as text) and compare it against ``voiceprint``."""
        if isinstance(text_or_metrics, SampleMetrics):
            metrics = text_or_metrics
        else:
            metrics = self.analyze_text(text_or_metrics, sample_id=sample_id)
        return DriftDetector().detect(metrics, voiceprint, timestamp)

    def refresh_status(self, voiceprint: VoicePrint, now: Optional[datetime] = None) -> VoicePrint:
        """Mark ``voiceprint`` stale once the inactivity window has passed."""
        now = now or datetime.now(timezone.utc)
        return voiceprint.refresh_status(now, timedelta(days=self.settings.stale_after_days))

    def summarize(self, voiceprint: VoicePrint) -> VoiceSummary:
        return summarize(voiceprint)

    def compare(self, a: VoicePrint, b: VoicePrint) -> int:
        return compare_voices(a, b)

    def evolution(self, old: VoicePrint, new: VoicePrint) -> VoiceEvolution:
        return detect_evolution(old, new)
