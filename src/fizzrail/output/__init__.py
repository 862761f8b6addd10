"""Reporters for a game run — plain lines, rich table, JSON."""
