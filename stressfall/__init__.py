"""
stressfall
----------
"Avoid the Finals Stress": a falling-object dodging game built on pygame.
"""

__version__ = "1.0.0"
