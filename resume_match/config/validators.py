"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List

SCORING_WEIGHT_KEYS = ("synonym_weight", "exact_weight", "jaccard_weight")
DEFAULT_SCORING_WEIGHTS = {"synonym_weight": 0.7, "exact_weight": 0.2, "jaccard_weight": 0.1}


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    None of these conditions is fatal; the matcher still runs, but scores
    may no longer be comparable with the default calibration.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    scoring = config_dict.get("scoring", {})
    if isinstance(scoring, dict):
        weights = {key: scoring.get(key, DEFAULT_SCORING_WEIGHTS[key]) for key in SCORING_WEIGHT_KEYS}
        if all(isinstance(value, (int, float)) for value in weights.values()):
            total = sum(weights.values())
            if abs(total - 1.0) > 1e-9:
                warning_messages.append(
                    f"Scoring weights sum to {total:.2f}, not 1.0; scores will not be "
                    f"comparable with the default calibration"
                )

        scaling = scoring.get("scaling_factor")
        if isinstance(scaling, (int, float)) and scaling != 1.5:
            warning_messages.append(
                f"scaling_factor changed from 1.5 to {scaling}; scores are recalibrated"
            )

    extraction = config_dict.get("extraction", {})
    limits = config_dict.get("limits", {})
    if isinstance(extraction, dict) and isinstance(limits, dict):
        max_keywords = extraction.get("max_keywords", 60)
        for key in ("max_resume_terms", "max_job_terms"):
            cap = limits.get(key)
            if isinstance(cap, int) and isinstance(max_keywords, int) and cap > max_keywords:
                warning_messages.append(
                    f"limits.{key} ({cap}) exceeds extraction.max_keywords ({max_keywords}); "
                    f"reported lists will include bigrams"
                )

        min_partial = extraction.get("min_partial_length")
        if isinstance(min_partial, int) and min_partial < 3:
            warning_messages.append(
                f"min_partial_length ({min_partial}) below 3 lets short tokens "
                f"produce spurious partial matches"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
