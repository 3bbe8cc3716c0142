"""llmlaunch — open an LLM prompt in the browser from the command line."""

__version__ = "0.1.0"
