from jsonreflow.engine.formatter import Formatter

__all__ = ["Formatter"]
