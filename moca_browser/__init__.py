"""Moca browser: launcher and desktop shell for the crawler's browser component."""
