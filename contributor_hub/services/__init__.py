"""Service layer: GitHub API access and contributor data."""
