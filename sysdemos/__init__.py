"""Teaching demos: a threaded shared counter and an FCFS process scheduler."""

__version__ = "0.1.0"
__all__ = ["threadnet", "scheduler"]