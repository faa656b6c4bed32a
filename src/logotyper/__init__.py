"""Logotyper - Compose simple logotypes from styled text and decorations.

Logotyper is the scene/editing engine behind a logotype composer: styled
characters plus freeform dots and curved or straight lines, arranged on
ordered layers over a solid or gradient background.

Example:
    $ logotyper preview "LogoType" --gradient "linear-gradient(45deg, #667eea, #764ba2)"

This builds a fresh composition for "LogoType" and prints its characters,
layers and background paint.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
