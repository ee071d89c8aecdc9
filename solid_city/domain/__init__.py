"""
Domain layer.

Holds the three example groups side by side with their counter-examples:
    - substitution: ``Movable`` and the vehicles
    - extension: ``Shootable``, the launchers and the composite blaster
    - responsibility: the single-purpose workers
"""
