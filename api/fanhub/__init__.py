"""Toronto Maple Leafs fan hub API."""
