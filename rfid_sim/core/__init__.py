"""Frames, scheduling, environment and event plumbing shared by sensors."""
