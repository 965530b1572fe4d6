"""
Simulation module containing the windowed and headless host loops.
"""

from .interactive import Simulation
from .headless import HeadlessSimulation
from .timing import delay

__all__ = ['Simulation', 'HeadlessSimulation', 'delay']
