from eightpuzzle.engine.generator.generator import GameGenerator

__all__ = ["GameGenerator"]
