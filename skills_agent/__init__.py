"""Skills Agent - on-demand skill loading for LLM agents."""

__version__ = "0.1.0"
