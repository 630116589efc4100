"""Run two commands in sequence between an input file and an output file, shell-pipe style."""

__version__ = "0.1.0"
__all__ = ["pipeline", "split"]