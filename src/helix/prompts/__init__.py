"""Helix - Prompt templates for the labs and profile generators."""
