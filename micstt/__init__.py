"""Microphone-to-LLM WebSocket server backed by Workers AI."""
