"""Worked examples of builder, abstract factory, singleton and adapter patterns."""

__version__ = "0.1.0"
__all__ = ["querybuilder", "units", "army", "singleton", "adapter"]