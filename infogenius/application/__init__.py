"""Application layer: state transitions and the infographic controller."""
