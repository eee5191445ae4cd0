"""Core generation pipeline: naming, emission, walking and assembly."""
