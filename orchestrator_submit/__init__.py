"""
Orchestrator Submitter - Main Package

This package submits work orders to an orchestration server over HTTP.
"""

__version__ = "1.0.0"
__author__ = "Orchestrator Submitter"

# Main package exports
__all__ = [
    "adapters",
    "configs",
    "core",
    "models",
    "services",
    "utils",
]
