"""Resource services; one class per API resource."""
