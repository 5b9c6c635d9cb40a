"""Service layer: pure shaping functions over upstream payloads."""
