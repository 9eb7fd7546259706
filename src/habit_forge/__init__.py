"""habit-forge: habit tracking with staked personal and group challenges."""

__version__ = "0.1.0"
