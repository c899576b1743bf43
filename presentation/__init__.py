"""Presentation layer - WebSocket/HTTP server and terminal CLI."""
