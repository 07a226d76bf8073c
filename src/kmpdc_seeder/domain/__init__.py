"""Register domain: normalization pipeline, import service and ports."""
