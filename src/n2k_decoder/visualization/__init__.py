"""Local visualization components."""

from n2k_decoder.visualization.console import ConsoleVisualizer

__all__ = ["ConsoleVisualizer"]
