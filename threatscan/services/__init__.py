"""Service layer: detection, scoring, explanation, storage and translation."""
