from .generator import generate_visualizer

__all__ = ["generate_visualizer"]
