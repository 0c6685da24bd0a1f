"""Foundation layer: tool core, registry, errors, configuration, testing helpers."""
