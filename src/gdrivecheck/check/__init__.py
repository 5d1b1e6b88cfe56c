"""Downloadability evaluators for gdrivecheck."""

from __future__ import annotations

from .folder import evaluate_folder
from .single import evaluate_file

__all__ = ["evaluate_file", "evaluate_folder"]
