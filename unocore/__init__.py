"""UNO rules engine with a scripted opponent and a terminal host."""

__version__ = "0.1.0"
