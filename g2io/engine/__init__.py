from g2io.engine.runner import GenerationRunner

__all__ = ["GenerationRunner"]
