"""HTTP surface of the build step."""
