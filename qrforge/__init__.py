"""Module layout, masking and penalty scoring for QR, Micro QR and rMQR symbols."""

__version__ = "0.1.0"
__all__ = ["canvas", "masking", "patterns", "penalty", "types"]