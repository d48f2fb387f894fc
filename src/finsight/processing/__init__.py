"""LLM processing: model factory and summary generation."""
