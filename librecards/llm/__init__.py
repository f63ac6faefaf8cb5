"""LLM access for bot players."""
