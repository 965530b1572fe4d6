"""
Flocking simulation: boids moving under cohesion, separation and
velocity matching inside a bounded 2D arena.
"""
