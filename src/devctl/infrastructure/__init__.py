"""Infrastructure capabilities injected into services."""
