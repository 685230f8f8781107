"""filescope - single-pass file analyzer."""

__version__ = "0.1.0"
