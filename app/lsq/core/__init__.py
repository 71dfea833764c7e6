"""Core services: configuration, paths, theming and listing orchestration."""
