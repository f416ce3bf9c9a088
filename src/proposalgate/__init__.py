"""Decision and gating engine for proposal workflows."""

__version__ = "0.1.0"
