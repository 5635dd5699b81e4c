"""Blind A/B benchmark backend for text-to-speech providers."""
