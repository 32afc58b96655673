"""Utility helpers for Unawareness."""
