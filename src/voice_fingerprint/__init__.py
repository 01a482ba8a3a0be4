"""Voice Fingerprint - build writing voice profiles and detect drift."""

__version__ = "0.1.0"
