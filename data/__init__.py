"""
Data package for the PED Calculator: loading observation files and
building the price and quantity trend view.
"""

from data.observation_loader import ObservationLoader, parse_point
from data.trend_visualizer import TrendVisualizer, trend_labels

__all__ = ['ObservationLoader', 'parse_point', 'TrendVisualizer', 'trend_labels']
