"""XML-Comp: reconcile tagged translation files against their originals."""

__version__ = "0.1.0"
